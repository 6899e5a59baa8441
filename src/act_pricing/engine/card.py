"""Listing-card pricing — the "from £X" figure and travel summary.

Cards are built without an event location, so the price uses the smallest
lineup and, for county-priced acts, the cheapest county on the act's table.
No margin is applied here.
"""

from __future__ import annotations

from typing import Any

from act_pricing.config.act import Act, load_act
from act_pricing.engine.lineup import lineup_bare_fee, travel_eligible
from act_pricing.engine.pricing import round_half_up
from act_pricing.models.results import CardPrice, TravelSummary


def cheapest_county_fee(act: Act) -> float:
    if not act.use_county_travel_fee:
        return 0.0
    fees = [fee for fee in act.county_fees.values() if fee > 0]
    return min(fees) if fees else 0.0


def compute_card_base_price(act: Act | dict[str, Any]) -> CardPrice:
    act = load_act(act)
    lineups = [lu for lu in act.lineups if lu.band_members is not None]
    if not lineups:
        return CardPrice(base_price=0, source="no_lineups")

    chosen = min(lineups, key=lambda lu: (len(lu.band_members), lineup_bare_fee(lu)))
    member_fees = lineup_bare_fee(chosen)
    travel_count = len(travel_eligible(chosen.band_members))
    travel_unit = cheapest_county_fee(act)
    travel = travel_unit * travel_count

    return CardPrice(
        base_price=round_half_up(member_fees + travel),
        lineup_size=chosen.act_size,
        member_fees=member_fees,
        travel_unit=travel_unit,
        travel_count=travel_count,
        travel=travel,
    )


def travel_summary(act: Act | dict[str, Any]) -> TravelSummary:
    act = load_act(act)
    if act.use_county_travel_fee:
        kind = "county"
    elif act.cost_per_mile > 0:
        kind = "per-mile"
    else:
        kind = "mu"
    return TravelSummary(
        type=kind,
        use_county_travel_fee=act.use_county_travel_fee,
        cost_per_mile=act.cost_per_mile,
        has_county_fees=act.has_county_fees,
    )
