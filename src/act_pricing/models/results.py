"""Result types — the contract between engine, API, and dashboard.

All results serialize with camelCase keys (``model_dump(by_alias=True)``)
because the booking frontend reads ``travelCalculated``, ``baseFeeTotal``
and friends directly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TravelDecision = Literal["county", "mu"]


class ResultModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ═══════════════════════════════════════════════════════════════════════════
# Travel data (distance client contract)
# ═══════════════════════════════════════════════════════════════════════════

class TravelLeg(ResultModel):
    """One direction of a trip as reported by the travel-data API."""

    distance_meters: float = 0.0
    duration_seconds: float = 0.0
    fare: float = 0.0
    """Tolls / congestion charges for the leg (£); the API reports null when unknown."""


class TripData(ResultModel):
    """Outbound and return legs between a member's home and the venue."""

    outbound: TravelLeg | None = None
    return_trip: TravelLeg | None = None

    @property
    def has_legs(self) -> bool:
        return self.outbound is not None or self.return_trip is not None


# ═══════════════════════════════════════════════════════════════════════════
# Fee breakdowns
# ═══════════════════════════════════════════════════════════════════════════

class MemberFee(ResultModel):
    """Base fee contribution of one member."""

    name: str
    member_base: float
    """``fee`` when the member is essential, else 0."""
    roles_total: float
    """Sum of essential additional-role fees."""
    member_total: float


class MemberTravelCost(ResultModel):
    """MU-rate travel cost for one member's round trip."""

    name: str
    origin: str
    destination: str
    total_distance_miles: float
    total_duration_hours: float
    fuel_fee: float
    time_fee: float
    late_fee: float
    toll_fee: float
    cost: float


class TraceEvent(ResultModel):
    """One step of the pricing decision trail."""

    step: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)


# ═══════════════════════════════════════════════════════════════════════════
# Pricing result
# ═══════════════════════════════════════════════════════════════════════════

class PricingResult(ResultModel):
    """Client-facing price for an act at a location and date.

    Only ``total`` and ``travel_calculated`` are meaningful on the soft
    failure paths (missing act → total 0, unusable lineup → total None).
    """

    total: int | float | None
    travel_calculated: bool = False
    decision: TravelDecision | None = None
    base_fee_total: float = 0.0
    travel_fee_total: float = 0.0
    margin_multiplier: float | None = None
    before_margin_subtotal: float = 0.0
    margin_added_approx: int = 0
    forced_test_price: bool = False

    county: str = ""
    """County the quote was resolved to ("" when none)."""
    lineup_size: str = ""
    northern_team_used: bool = False
    travel_eligible_count: int = 0
    member_fees: list[MemberFee] = Field(default_factory=list)
    member_travel: list[MemberTravelCost] = Field(default_factory=list)
    skipped_members: list[str] = Field(default_factory=list)
    """Members whose MU travel was skipped (no postcode or lookup failure)."""
    trace: list[TraceEvent] = Field(default_factory=list)


class MemberFeeResult(ResultModel):
    """Fee quoted to a single musician in an availability request."""

    name: str
    base: float
    essential_extras: float
    travel: float
    travel_source: Literal["county", "per-mile", "mu", "none"]
    total: int
    matched_in_lineup: bool = True


class TravelSummary(ResultModel):
    """How an act charges for travel, for listing cards and filters."""

    type: Literal["county", "per-mile", "mu"]
    use_county_travel_fee: bool
    cost_per_mile: float
    has_county_fees: bool


class CardPrice(ResultModel):
    """"From" price shown on an act's listing card."""

    base_price: int
    lineup_size: str = ""
    member_fees: float = 0.0
    travel_unit: float = 0.0
    """Cheapest positive county fee (0 when county pricing is off)."""
    travel_count: int = 0
    travel: float = 0.0
    source: Literal["lineup", "no_lineups"] = "lineup"
