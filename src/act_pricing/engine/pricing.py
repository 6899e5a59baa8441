"""Act pricing — base fees + travel + margin → client-facing total.

Sequence:
  act → test-act guard → lineup pick → county resolution
  → northern team swap → base fees → travel policy (county | MU)
  → subtotal × margin → half-up rounding

Soft failures never raise: a missing or non-object act prices at 0, an act
with no usable lineup prices at ``None``.

Entry point: ``calculate_act_pricing(act, county, address, date, lineup)``
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from act_pricing.config.act import Act, Lineup, load_act, load_lineup
from act_pricing.config.coerce import normalize_event_date
from act_pricing.config.rates import RateCard
from act_pricing.engine.county import pick_destination, resolve_county
from act_pricing.engine.lineup import member_fee, resolve_team, select_lineup, travel_eligible
from act_pricing.engine.trace import DecisionTrail
from act_pricing.engine.travel import county_travel_fee, mu_travel_fee, select_travel_policy
from act_pricing.models.results import PricingResult
from act_pricing.services.distance_client import DistanceClient, HttpDistanceClient


def round_half_up(value: float) -> int:
    """Nearest whole pound, halves rounded up (1396.5 → 1397)."""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def apply_margin(subtotal: float, margin_multiplier: float) -> tuple[int, int]:
    """``(total, margin_added)`` for a subtotal, both rounded half-up."""
    with_margin = subtotal * margin_multiplier
    return round_half_up(with_margin), round_half_up(with_margin - subtotal)


def calculate_act_pricing(
    act: Act | dict[str, Any] | None,
    selected_county: Any = None,
    selected_address: Any = None,
    selected_date: Any = None,
    selected_lineup: Lineup | dict[str, Any] | None = None,
    *,
    distance_client: DistanceClient | None = None,
    rates: RateCard | None = None,
    log: logging.Logger | None = None,
) -> PricingResult:
    """Price ``act`` for an event at ``selected_address`` on ``selected_date``.

    ``selected_county`` wins over the address when it is a real county name.
    ``distance_client`` is only used on the MU path; when omitted an
    ``HttpDistanceClient`` for the configured travel API is created.
    """
    rates = rates or RateCard()
    trail = DecisionTrail(log)

    if act is None:
        trail.warn("input", "missing act")
        return PricingResult(total=0, travel_calculated=False, trace=trail.events)
    if not isinstance(act, (Act, dict)):
        trail.warn("input", "act document is not an object", received=type(act).__name__)
        return PricingResult(total=0, travel_calculated=False, trace=trail.events)

    act = load_act(act)

    if act.is_test:
        trail.record("input", "test act, forcing nominal price", price=rates.test_act_price)
        return PricingResult(
            total=rates.test_act_price,
            travel_calculated=False,
            forced_test_price=True,
            trace=trail.events,
        )

    lineup = select_lineup(act, load_lineup(selected_lineup))
    if lineup is None:
        trail.warn("lineup", "no lineup with a member list")
        return PricingResult(total=None, travel_calculated=False, trace=trail.events)
    trail.record("lineup", "using lineup", act_size=lineup.act_size, members=len(lineup.band_members or []))

    # ── county + team ───────────────────────────────────────────────────
    county = resolve_county(selected_county, selected_address)
    trail.record("county", "resolved county", selected=str(selected_county or "") or None, county=county or None)

    members, northern = resolve_team(act, lineup, county)
    if northern:
        trail.record("team", "northern gig, using northern team", members=len(members))
    eligible = travel_eligible(members)

    # ── base fees ───────────────────────────────────────────────────────
    fees = [member_fee(m) for m in members]
    base_fee_total = sum(f.member_total for f in fees)
    trail.record("fees", "base lineup fee", base_fee_total=base_fee_total, eligible=len(eligible))

    margin = act.margin_multiplier
    common = dict(
        margin_multiplier=margin,
        county=county,
        lineup_size=lineup.act_size,
        northern_team_used=northern,
        travel_eligible_count=len(eligible),
        member_fees=fees,
    )

    # ── travel ──────────────────────────────────────────────────────────
    policy = select_travel_policy(act, county, len(eligible), trail)

    if policy.decision == "county":
        travel_fee = county_travel_fee(policy, len(eligible))
        trail.record("travel", "county travel total", travel_fee=travel_fee)
        return _priced(base_fee_total, travel_fee, margin, trail, decision="county", **common)

    destination = pick_destination(selected_address)
    event_date = normalize_event_date(selected_date)
    if not destination or not event_date:
        trail.warn(
            "travel", "no destination/date for MU travel, pricing base fee only",
            destination=destination or None, date=event_date or None,
        )
        return _priced(
            base_fee_total, 0.0, margin, trail,
            decision="mu", travel_calculated=False, **common,
        )

    client = distance_client or HttpDistanceClient()
    mu = mu_travel_fee(eligible, destination, event_date, client, rates, trail)
    trail.record("travel", "MU travel total", travel_fee=round(mu.total, 2), skipped=len(mu.skipped))
    return _priced(
        base_fee_total, mu.total, margin, trail,
        decision="mu", member_travel=mu.member_costs, skipped_members=mu.skipped, **common,
    )


def _priced(
    base_fee_total: float,
    travel_fee_total: float,
    margin: float,
    trail: DecisionTrail,
    travel_calculated: bool = True,
    **fields: Any,
) -> PricingResult:
    subtotal = base_fee_total + travel_fee_total
    total, margin_added = apply_margin(subtotal, margin)
    trail.record("total", "final price", subtotal=round(subtotal, 2), margin=margin, total=total)
    return PricingResult(
        total=total,
        travel_calculated=travel_calculated,
        base_fee_total=base_fee_total,
        travel_fee_total=travel_fee_total,
        before_margin_subtotal=subtotal,
        margin_added_approx=margin_added,
        trace=trail.events,
        **fields,
    )
