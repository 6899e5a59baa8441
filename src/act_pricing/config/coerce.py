"""Boundary parsing for loose act documents.

Act documents come from a document store and from browser forms, so flags
arrive as ``"true"``/``"on"``/``1`` and fees as strings or ``None``.  Every
helper here is total: bad input falls back to a default, never raises.
The engine only ever sees the cleaned values.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any

_TRUTHY_STRINGS = frozenset({"true", "1", "yes", "on"})

# Full UK postcode: outcode + inward code (digit + two letters).
POSTCODE_RE = re.compile(r"[A-Z]{1,2}\d{1,2}[A-Z]?\s*\d[A-Z]{2}")


def parse_truthy(value: Any) -> bool:
    """True for ``True``, ``1``, and the strings "true", "1", "yes", "on"."""
    if value is True:
        return True
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value == 1
    return str(value).strip().lower() in _TRUTHY_STRINGS


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Best-effort float conversion; non-finite and malformed values give ``default``."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip().lstrip("£").replace(",", "")
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def normalize_county(value: Any) -> str:
    """Lookup key for a county name: lowercased, trimmed, underscores as spaces."""
    return str(value or "").replace("_", " ").strip().lower()


def valid_postcode(value: Any) -> str:
    """First full UK postcode in ``value``, uppercased with spaces removed, or ""."""
    match = POSTCODE_RE.search(str(value or "").upper())
    return re.sub(r"\s+", "", match.group(0)) if match else ""


def normalize_event_date(value: Any) -> str:
    """ISO ``YYYY-MM-DD`` for a date, datetime or ISO-ish string; "" when unusable."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value or "").strip()
    if len(text) < 10:
        return ""
    try:
        return date.fromisoformat(text[:10]).isoformat()
    except ValueError:
        return ""


def normalize_county_fees(raw: Any) -> dict[str, float]:
    """Flatten any supported county-fee container into ``{county_key: fee}``.

    Accepted shapes:
      - mapping: ``{"Kent": 50}`` or ``{"Kent": {"fee": 50}}``
      - records: ``[{"county": "Kent", "fee": 50}]`` (``name``/``key`` and
        ``price``/``value`` are accepted as aliases)
      - pairs:   ``[["Kent", 50]]``

    The first entry for a county wins.  Entries with an empty county name are
    dropped; unparseable fees become 0.
    """
    if not raw:
        return {}

    pairs: list[tuple[Any, Any]] = []
    if isinstance(raw, dict):
        pairs = list(raw.items())
    elif isinstance(raw, (list, tuple)):
        for item in raw:
            if isinstance(item, dict):
                name = item.get("county") or item.get("name") or item.get("key")
                pairs.append((name, _first_present(item, "fee", "price", "value")))
            elif isinstance(item, (list, tuple)) and len(item) == 2:
                pairs.append((item[0], item[1]))

    fees: dict[str, float] = {}
    for name, value in pairs:
        key = normalize_county(name)
        if not key or key in fees:
            continue
        if isinstance(value, dict):
            value = _first_present(value, "fee", "price", "value")
        fees[key] = coerce_number(value)
    return fees


def first_present(*values: Any) -> Any:
    """First argument that is not ``None``."""
    for value in values:
        if value is not None:
            return value
    return None


def _first_present(mapping: dict, *keys: str) -> Any:
    return first_present(*(mapping.get(k) for k in keys))
