"""Travel policy selection and travel-fee computation.

Two policies:
  - ``county``: flat per-member fee from the act's county table
  - ``mu``:     per-member round trip at MU rates
                (miles × fuel + hours × time + late-return fee + tolls)

County pricing only survives when it can actually be applied; every other
case falls back to MU.
"""

from __future__ import annotations

from dataclasses import dataclass

from act_pricing.config.act import Act, Member
from act_pricing.config.rates import RateCard
from act_pricing.engine.trace import DecisionTrail
from act_pricing.models.results import MemberTravelCost, TravelDecision, TripData
from act_pricing.services.distance_client import DistanceClient


@dataclass(frozen=True)
class TravelPolicy:
    decision: TravelDecision
    fee_per_member: float = 0.0


def select_travel_policy(
    act: Act,
    county: str,
    eligible_count: int,
    trail: DecisionTrail | None = None,
) -> TravelPolicy:
    """County when enabled and applicable, otherwise MU."""
    trail = trail or DecisionTrail()

    if not act.use_county_travel_fee:
        trail.record("policy", "county travel fees disabled, using MU rates")
        return TravelPolicy("mu")

    if not county:
        trail.warn("policy", "county travel fees enabled but no county resolved, falling back to MU")
        return TravelPolicy("mu")

    fee = act.county_fee_for(county)
    if fee <= 0 or eligible_count <= 0:
        trail.warn(
            "policy",
            "county fee missing/zero or no travel-eligible members, falling back to MU",
            county=county, fee_per_member=fee, eligible=eligible_count,
        )
        return TravelPolicy("mu")

    trail.record("policy", "using county flat fee", county=county, fee_per_member=fee)
    return TravelPolicy("county", fee_per_member=fee)


def county_travel_fee(policy: TravelPolicy, eligible_count: int) -> float:
    return policy.fee_per_member * eligible_count


def mu_trip_cost(
    trip: TripData,
    rates: RateCard,
    name: str = "member",
    origin: str = "",
    destination: str = "",
) -> MemberTravelCost:
    """MU-rate cost of one round trip."""
    out = trip.outbound
    ret = trip.return_trip
    out_m = out.distance_meters if out else 0.0
    ret_m = ret.distance_meters if ret else 0.0
    out_s = out.duration_seconds if out else 0.0
    ret_s = ret.duration_seconds if ret else 0.0

    miles = (out_m + ret_m) / rates.metres_per_mile
    hours = (out_s + ret_s) / 3600
    fuel_fee = miles * rates.fuel_per_mile
    time_fee = hours * rates.time_per_hour
    late_fee = rates.late_return_fee if ret_s / 3600 > rates.late_return_threshold_hours else 0.0
    toll_fee = (out.fare if out else 0.0) + (ret.fare if ret else 0.0)

    return MemberTravelCost(
        name=name,
        origin=origin,
        destination=destination,
        total_distance_miles=miles,
        total_duration_hours=hours,
        fuel_fee=fuel_fee,
        time_fee=time_fee,
        late_fee=late_fee,
        toll_fee=toll_fee,
        cost=fuel_fee + time_fee + late_fee + toll_fee,
    )


@dataclass
class MUTravel:
    total: float
    member_costs: list[MemberTravelCost]
    skipped: list[str]


def mu_travel_fee(
    members: list[Member],
    destination: str,
    event_date: str,
    client: DistanceClient,
    rates: RateCard,
    trail: DecisionTrail | None = None,
) -> MUTravel:
    """Sum MU round-trip costs over ``members``.

    Members without a postcode, and members whose lookup fails or returns
    no legs, contribute nothing and are listed in ``skipped``.
    """
    trail = trail or DecisionTrail()
    costs: list[MemberTravelCost] = []
    skipped: list[str] = []

    for member in members:
        name = member.display_name
        if not member.postcode:
            trail.warn("mu", "skipping member with no postcode", member=name)
            skipped.append(name)
            continue
        try:
            trip = client.fetch_trip(member.postcode, destination, event_date)
        except Exception as e:
            trail.warn("mu", "travel lookup failed", member=name, error=str(e))
            skipped.append(name)
            continue
        if not trip.has_legs:
            trail.warn("mu", "travel lookup returned no legs", member=name, origin=member.postcode)
            skipped.append(name)
            continue

        cost = mu_trip_cost(trip, rates, name=name, origin=member.postcode, destination=destination)
        trail.record(
            "mu", "member travel", member=name, miles=round(cost.total_distance_miles, 2),
            hours=round(cost.total_duration_hours, 2), cost=round(cost.cost, 2),
        )
        costs.append(cost)

    return MUTravel(total=sum(c.cost for c in costs), member_costs=costs, skipped=skipped)
