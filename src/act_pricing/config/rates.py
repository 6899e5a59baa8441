"""Rate card — the constants behind MU travel pricing and the client margin."""

from pydantic import BaseModel, Field


class RateCard(BaseModel):
    """Musicians'-union style travel rates plus marketplace pricing policy."""

    fuel_per_mile: float = Field(default=0.56, ge=0, description="Fuel allowance per round-trip mile (£)")
    time_per_hour: float = Field(default=13.23, ge=0, description="Travel-time allowance per hour (£)")
    late_return_fee: float = Field(default=136.0, ge=0, description="Flat fee when the return leg is long (£)")
    late_return_threshold_hours: float = Field(
        default=1.0, ge=0,
        description="Return-leg duration above which the late-return fee applies (hours)",
    )
    metres_per_mile: float = Field(default=1609.34, gt=0, description="Distance conversion")
    per_mile_round_trip_factor: float = Field(
        default=2.0, gt=0,
        description="Outbound miles are multiplied by this for per-mile message fees",
    )
    test_act_price: float = Field(default=0.5, ge=0, description="Nominal price returned for test acts (£)")
