"""Lineup selection and base-fee aggregation.

Pure arithmetic over the hydrated ``Act``: which members play, which of
them travel, and what they cost before travel and margin.
"""

from __future__ import annotations

from act_pricing.config.act import Act, Lineup, Member
from act_pricing.engine.county import is_northern_county
from act_pricing.models.results import MemberFee


def select_lineup(act: Act, selected: Lineup | None = None) -> Lineup | None:
    """The caller's lineup when it has a member list, else the act's smallest.

    Lineups without a member list are never chosen; ties keep the first.
    """
    if selected is not None and selected.band_members is not None:
        return selected
    smallest: Lineup | None = None
    for lineup in act.lineups:
        if lineup.band_members is None:
            continue
        if smallest is None or len(lineup.band_members) < len(smallest.band_members):
            smallest = lineup
    return smallest


def resolve_team(act: Act, lineup: Lineup, county: str) -> tuple[list[Member], bool]:
    """Members who play this gig and whether the northern team was swapped in."""
    if act.use_different_team_for_northern_gigs and is_northern_county(county):
        return list(act.northern_team), True
    return list(lineup.band_members or []), False


def travel_eligible(members: list[Member]) -> list[Member]:
    return [m for m in members if not m.is_manager_like]


def essential_roles_total(member: Member) -> float:
    return sum(r.additional_fee for r in member.additional_roles if r.is_essential)


def member_fee(member: Member) -> MemberFee:
    """Base fee (essential members only) plus essential role surcharges."""
    member_base = member.fee if member.is_essential else 0.0
    roles_total = essential_roles_total(member)
    return MemberFee(
        name=member.display_name,
        member_base=member_base,
        roles_total=roles_total,
        member_total=member_base + roles_total,
    )


def lineup_bare_fee(lineup: Lineup) -> float:
    """Every member's fee plus essential roles, regardless of essential flag.

    Used for listing-card prices, which advertise the full lineup.
    """
    return sum(m.fee + essential_roles_total(m) for m in lineup.band_members or [])
