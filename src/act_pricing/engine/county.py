"""County / outcode resolution.

Turns whatever the client typed (a full address, a bare postcode, a county
name, or an address object from the booking form) into a county name the
act's fee table and the northern-region set can be keyed on.
"""

from __future__ import annotations

import re
from typing import Any

from act_pricing.config.coerce import normalize_county, valid_postcode
from act_pricing.data.outcodes import OUTCODES_BY_COUNTY
from act_pricing.data.regions import NORTHERN_COUNTIES

_POSTCODE_RE = re.compile(r"\b([A-Z]{1,2}\d{1,2}[A-Z]?)\s*\d[A-Z]{2}\b")
_OUTCODE_RE = re.compile(r"\b([A-Z]{1,2}\d{1,2}[A-Z]?)\b")

_COUNTY_BY_OUTCODE: dict[str, str] = {}
for _county, _outcodes in OUTCODES_BY_COUNTY.items():
    for _oc in _outcodes:
        _COUNTY_BY_OUTCODE.setdefault(_oc.upper(), _county)


def _address_text(address: Any) -> str:
    if isinstance(address, dict):
        return str(address.get("postcode") or address.get("postCode") or address.get("address") or "")
    return str(address or "")


def extract_outcode(address: Any) -> str:
    """Outcode (e.g. ``"SW1A"``) from an address string or object; "" if none.

    A full postcode anywhere in the text beats an earlier outcode-like token
    such as a unit number ("Unit B2").
    """
    text = _address_text(address).upper()
    match = _POSTCODE_RE.search(text) or _OUTCODE_RE.search(text)
    return match.group(1) if match else ""


def county_from_outcode(outcode: str) -> str:
    if not outcode:
        return ""
    return _COUNTY_BY_OUTCODE.get(str(outcode).strip().upper(), "")


def sanitize_county(value: Any) -> str:
    """Clean a user-supplied county.

    A value carrying a known outcode resolves through the table; any other
    value containing a digit is an address fragment and is discarded.
    """
    text = str(value or "").strip()
    if not text:
        return ""
    county = county_from_outcode(extract_outcode(text))
    if county:
        return county
    if re.search(r"\d", text):
        return ""
    return text


def resolve_county(selected_county: Any, selected_address: Any) -> str:
    """Explicit (sanitized) county, else the address outcode's county, else ""."""
    return sanitize_county(selected_county) or county_from_outcode(extract_outcode(selected_address))


def is_northern_county(county: str) -> bool:
    return normalize_county(county) in NORTHERN_COUNTIES


def pick_destination(address: Any) -> str:
    """Destination for travel lookups: a clean postcode when present, else the raw text."""
    if not address:
        return ""
    if isinstance(address, dict):
        raw = (
            address.get("postcode")
            or address.get("postCode")
            or address.get("formattedAddress")
            or address.get("address")
            or ""
        )
    else:
        raw = address
    return valid_postcode(raw) or str(raw or "").strip()
