"""Act, lineup, member and role models — the pricing inputs.

Documents use camelCase keys (``bandMembers``, ``useCountyTravelFee``);
models expose snake_case attributes and accept either form.  All flag and
number fields go through the boundary parsers in ``config.coerce`` so a
malformed document never fails validation on those fields.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from act_pricing.config.coerce import (
    coerce_number,
    first_present,
    normalize_county,
    normalize_county_fees,
    parse_truthy,
    valid_postcode,
)

DEFAULT_MARGIN_MULTIPLIER = 1.33

_MANAGER_RE = re.compile(r"\b(manager|management)\b", re.IGNORECASE)


class DocumentModel(BaseModel):
    """Base for models hydrated from stored act documents."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _dicts_only(value: Any) -> list:
    """Keep dict / model entries of a list; anything else becomes an empty list."""
    if not isinstance(value, (list, tuple)):
        return []
    return [v for v in value if isinstance(v, (dict, BaseModel))]


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


# ═══════════════════════════════════════════════════════════════════════════
# Role / Member
# ═══════════════════════════════════════════════════════════════════════════

class Role(DocumentModel):
    """An extra duty a member can cover (MD, sound engineer, DJ set ...)."""

    role: str = Field(default="", description="Role label")
    title: str = Field(default="", description="Alternative label used by older documents")
    is_essential: bool = Field(default=False, description="Always charged when true")
    additional_fee: float = Field(default=0.0, description="Surcharge for covering this role (£)")

    @field_validator("role", "title", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return str(v or "")

    @field_validator("is_essential", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return parse_truthy(v)

    @field_validator("additional_fee", mode="before")
    @classmethod
    def _fee(cls, v: Any) -> float:
        return coerce_number(v)


class Member(DocumentModel):
    """One lineup participant."""

    member_id: str | None = Field(default=None, alias="_id")
    first_name: str = ""
    last_name: str = ""
    email: str | None = None
    phone_number: str | None = None
    instrument: str = ""
    title: str = ""
    is_essential: bool = Field(default=False, description="Base fee only counted when true")
    fee: float = Field(default=0.0, description="Base performance fee (£)")
    additional_roles: list[Role] = Field(default_factory=list)
    postcode: str | None = Field(
        default=None,
        description="Home postcode, uppercased without spaces; None when no valid postcode",
    )
    is_manager: bool = False
    is_non_performer: bool = False

    @model_validator(mode="before")
    @classmethod
    def _pick_postcode(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        address = data.get("address")
        raw = (
            data.get("postCode")
            or data.get("postcode")
            or data.get("homePostcode")
            or data.get("postalCode")
            or (address.get("postcode") if isinstance(address, dict) else address)
        )
        data["postcode"] = valid_postcode(raw) or None
        data.pop("postCode", None)
        return data

    @field_validator("member_id", "email", "phone_number", mode="before")
    @classmethod
    def _ident(cls, v: Any) -> str | None:
        return _optional_str(v)

    @field_validator("first_name", "last_name", "instrument", "title", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return str(v or "")

    @field_validator("is_essential", "is_manager", "is_non_performer", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return parse_truthy(v)

    @field_validator("fee", mode="before")
    @classmethod
    def _fee(cls, v: Any) -> float:
        return coerce_number(v)

    @field_validator("additional_roles", mode="before")
    @classmethod
    def _roles(cls, v: Any) -> list:
        return _dicts_only(v)

    @property
    def display_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or "member"

    @property
    def is_manager_like(self) -> bool:
        """Managers and non-performers never travel to the gig."""
        if self.is_manager or self.is_non_performer:
            return True
        if _MANAGER_RE.search(self.instrument) or _MANAGER_RE.search(self.title):
            return True
        return any(
            _MANAGER_RE.search(r.role) or _MANAGER_RE.search(r.title)
            for r in self.additional_roles
        )


# ═══════════════════════════════════════════════════════════════════════════
# Lineup / Act
# ═══════════════════════════════════════════════════════════════════════════

class Lineup(DocumentModel):
    """A priced configuration of the act (e.g. "4-Piece")."""

    lineup_id: str | None = Field(default=None, alias="_id")
    act_size: str = Field(default="", description="Human label, e.g. '6-Piece'")
    band_members: list[Member] | None = Field(
        default=None,
        description="None when the document has no member list (lineup unusable)",
    )
    advertised_total: float = Field(
        default=0.0,
        alias="base_fee",
        description="Lineup total from base_fee[0].total_fee; used for per-head splits",
    )

    @field_validator("lineup_id", mode="before")
    @classmethod
    def _ident(cls, v: Any) -> str | None:
        return _optional_str(v)

    @field_validator("act_size", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return str(v or "")

    @field_validator("band_members", mode="before")
    @classmethod
    def _members(cls, v: Any) -> list | None:
        if not isinstance(v, (list, tuple)):
            return None
        return _dicts_only(v)

    @field_validator("advertised_total", mode="before")
    @classmethod
    def _advertised(cls, v: Any) -> float:
        if isinstance(v, (list, tuple)):
            v = v[0] if v else None
        if isinstance(v, dict):
            v = v.get("total_fee")
        return coerce_number(v)


class Act(DocumentModel):
    """Everything the pricing engine reads from an act document."""

    act_id: str | None = Field(default=None, alias="_id")
    name: str = ""
    tsc_name: str = ""
    lineups: list[Lineup] = Field(default_factory=list)
    county_fees: dict[str, float] = Field(
        default_factory=dict,
        description="Normalized county name → flat per-member travel fee (£)",
    )
    use_county_travel_fee: bool = Field(default=False, description="Prefer county flat fees over MU rates")
    cost_per_mile: float = Field(default=0.0, ge=0, description="Per-mile travel rate (£) for message fees")
    use_different_team_for_northern_gigs: bool = False
    northern_team: list[Member] = Field(default_factory=list)
    margin_multiplier: float = Field(default=DEFAULT_MARGIN_MULTIPLIER, gt=0, description="Client markup")
    is_test: bool = Field(default=False, description="Test listings are always priced at the nominal test price")

    @model_validator(mode="before")
    @classmethod
    def _fold_alternate_paths(cls, data: Any) -> Any:
        """Resolve fields that older documents store under other keys."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        act_data = data.get("actData") if isinstance(data.get("actData"), dict) else {}
        travel = data.get("travelModel") if isinstance(data.get("travelModel"), dict) else {}
        pricing = data.get("pricing") if isinstance(data.get("pricing"), dict) else {}

        data["useCountyTravelFee"] = first_present(
            data.pop("use_county_travel_fee", None),
            data.get("useCountyTravelFee"),
            act_data.get("useCountyTravelFee"),
            travel.get("useCountyTravelFee"),
            data.get("useCountryTravelFee"),
        )
        data["countyFees"] = first_present(
            data.pop("county_fees", None),
            data.get("countyFees"),
            travel.get("countyFees"),
        )
        data["isTest"] = (
            parse_truthy(data.pop("is_test", None))
            or parse_truthy(data.get("isTest"))
            or parse_truthy(act_data.get("isTest"))
        )
        data["marginMultiplier"] = first_present(
            pricing.get("marginMultiplier"),
            data.pop("margin_multiplier", None),
            data.get("marginMultiplier"),
        )
        return data

    @field_validator("act_id", mode="before")
    @classmethod
    def _ident(cls, v: Any) -> str | None:
        return _optional_str(v)

    @field_validator("name", "tsc_name", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return str(v or "")

    @field_validator("lineups", "northern_team", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> list:
        return _dicts_only(v)

    @field_validator("county_fees", mode="before")
    @classmethod
    def _county_fees(cls, v: Any) -> dict[str, float]:
        return normalize_county_fees(v)

    @field_validator("use_county_travel_fee", "use_different_team_for_northern_gigs", "is_test", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return parse_truthy(v)

    @field_validator("cost_per_mile", mode="before")
    @classmethod
    def _per_mile(cls, v: Any) -> float:
        return max(coerce_number(v), 0.0)

    @field_validator("margin_multiplier", mode="before")
    @classmethod
    def _margin(cls, v: Any) -> float:
        margin = coerce_number(v, default=DEFAULT_MARGIN_MULTIPLIER)
        return margin if margin > 0 else DEFAULT_MARGIN_MULTIPLIER

    def county_fee_for(self, county: str) -> float:
        """Per-member flat fee for ``county``; 0 when the act has none."""
        return self.county_fees.get(normalize_county(county), 0.0)

    @property
    def has_county_fees(self) -> bool:
        return bool(self.county_fees)


def load_act(document: Act | dict[str, Any]) -> Act:
    """Hydrate an ``Act`` from a stored document (no-op for an ``Act``)."""
    if isinstance(document, Act):
        return document
    return Act.model_validate(document)


def load_lineup(document: Lineup | dict[str, Any] | None) -> Lineup | None:
    """Hydrate a caller-supplied lineup; ``None`` passes through."""
    if document is None or isinstance(document, Lineup):
        return document
    if not isinstance(document, dict):
        return None
    return Lineup.model_validate(document)
