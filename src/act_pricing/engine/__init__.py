"""Engine — county resolution, fee aggregation, travel policy, pricing."""

from act_pricing.engine.county import extract_outcode, county_from_outcode, resolve_county
from act_pricing.engine.lineup import member_fee, select_lineup, resolve_team, travel_eligible
from act_pricing.engine.travel import select_travel_policy, mu_trip_cost, mu_travel_fee
from act_pricing.engine.pricing import calculate_act_pricing, round_half_up
from act_pricing.engine.member_fee import compute_member_fee
from act_pricing.engine.card import compute_card_base_price, travel_summary
from act_pricing.engine.trace import DecisionTrail

__all__ = [
    "extract_outcode",
    "county_from_outcode",
    "resolve_county",
    "member_fee",
    "select_lineup",
    "resolve_team",
    "travel_eligible",
    "select_travel_policy",
    "mu_trip_cost",
    "mu_travel_fee",
    "calculate_act_pricing",
    "round_half_up",
    # Availability / listing helpers
    "compute_member_fee",
    "compute_card_base_price",
    "travel_summary",
    "DecisionTrail",
]
