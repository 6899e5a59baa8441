"""Result models — pricing output contracts."""

from act_pricing.models.results import (
    CardPrice,
    MemberFee,
    MemberFeeResult,
    MemberTravelCost,
    PricingResult,
    TraceEvent,
    TravelLeg,
    TravelSummary,
    TripData,
)

__all__ = [
    "CardPrice",
    "MemberFee",
    "MemberFeeResult",
    "MemberTravelCost",
    "PricingResult",
    "TraceEvent",
    "TravelLeg",
    "TravelSummary",
    "TripData",
]
