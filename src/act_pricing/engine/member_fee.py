"""Per-member fee quoted in availability requests.

A musician asked "are you free on the 14th?" is quoted their own fee plus
their own travel, rounded up to the pound.  Travel falls through three
policies in order: county flat fee, per-mile rate, MU round trip.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from act_pricing.config.act import Act, Lineup, Member, load_act, load_lineup
from act_pricing.config.coerce import normalize_event_date
from act_pricing.config.rates import RateCard
from act_pricing.engine.county import county_from_outcode, extract_outcode, pick_destination
from act_pricing.engine.lineup import essential_roles_total
from act_pricing.engine.travel import mu_trip_cost
from act_pricing.models.results import MemberFeeResult
from act_pricing.services.distance_client import DistanceClient, HttpDistanceClient

logger = logging.getLogger(__name__)


def _digits(value: str | None) -> str:
    return re.sub(r"\D", "", value or "")


def find_lineup_member(lineup: Lineup, member: Member) -> Member | None:
    """Lineup entry matching ``member`` by id, e-mail, or phone digits."""
    for candidate in lineup.band_members or []:
        if member.member_id and candidate.member_id == member.member_id:
            return candidate
        if member.email and candidate.email and candidate.email.lower() == member.email.lower():
            return candidate
        if _digits(member.phone_number) and _digits(candidate.phone_number) == _digits(member.phone_number):
            return candidate
    return None


def _travel(
    act: Act,
    member: Member,
    address: Any,
    event_date: str,
    client: DistanceClient | None,
    rates: RateCard,
) -> tuple[float, str]:
    """``(travel, source)`` for one member.

    Any failed distance lookup is logged and the fee is quoted with no
    travel (``source == "none"``).
    """
    if act.use_county_travel_fee:
        county = county_from_outcode(extract_outcode(address))
        per_member = act.county_fee_for(county) if county else 0.0
        if per_member > 0:
            return per_member, "county"

    destination = pick_destination(address)
    if not member.postcode or not destination:
        return 0.0, "none"

    client = client or HttpDistanceClient()
    try:
        trip = client.fetch_trip(member.postcode, destination, event_date)
    except Exception as e:
        logger.warning(f"Travel lookup failed for {member.display_name}: {e}")
        return 0.0, "none"

    if act.cost_per_mile > 0:
        metres = trip.outbound.distance_meters if trip.outbound else 0.0
        miles = metres / rates.metres_per_mile
        return miles * act.cost_per_mile * rates.per_mile_round_trip_factor, "per-mile"

    if trip.outbound is None or trip.return_trip is None:
        return 0.0, "none"
    return mu_trip_cost(trip, rates).cost, "mu"


def compute_member_fee(
    act: Act | dict[str, Any],
    lineup: Lineup | dict[str, Any],
    member: Member | dict[str, Any],
    address: Any = None,
    event_date: Any = None,
    *,
    distance_client: DistanceClient | None = None,
    rates: RateCard | None = None,
) -> MemberFeeResult:
    """Fee for one musician: base + essential extras + own travel, rounded up.

    ``base`` is the member's own fee, or an even per-head share of the
    lineup's advertised total when the member has none.
    """
    rates = rates or RateCard()
    act = load_act(act)
    lineup = load_lineup(lineup) or Lineup()
    member = member if isinstance(member, Member) else Member.model_validate(member)

    full = find_lineup_member(lineup, member)
    if full is None:
        logger.warning(f"No lineup entry matches {member.display_name}; using the supplied member")
    entry = full or member

    base = entry.fee
    if base <= 0 and lineup.advertised_total > 0:
        head_count = max(1, len(lineup.band_members or []))
        base = float(math.ceil(lineup.advertised_total / head_count))

    extras = essential_roles_total(entry)
    travel, source = _travel(act, entry, address, normalize_event_date(event_date), distance_client, rates)

    total = math.ceil(max(0.0, base + extras + travel))
    logger.debug(
        f"Member fee {entry.display_name}: base={base} extras={extras} "
        f"travel={travel:.2f} ({source}) total={total}"
    )
    return MemberFeeResult(
        name=entry.display_name,
        base=base,
        essential_extras=extras,
        travel=travel,
        travel_source=source,
        total=total,
        matched_in_lineup=full is not None,
    )
