"""Shared test fixtures — act documents and a stub distance client."""

from __future__ import annotations

from typing import Any

import pytest

from helpers import StubDistanceClient, make_trip, member


@pytest.fixture
def trio() -> list[dict[str, Any]]:
    """Three essential £300 musicians from Kent — base fee 900, all travel."""
    return [
        member("Amy", postcode="ME14 1XX"),
        member("Ben", postcode="CT1 2AA"),
        member("Cat", postcode="TN1 1AA"),
    ]


@pytest.fixture
def county_act(trio) -> dict[str, Any]:
    """County-priced act: Kent at £50 per travelling member."""
    return {
        "name": "The Kent Collective",
        "useCountyTravelFee": True,
        "countyFees": {"kent": 50},
        "lineups": [
            {"actSize": "5-Piece", "bandMembers": trio + [member("Dan"), member("Eve")]},
            {"actSize": "Trio", "bandMembers": trio},
        ],
    }


@pytest.fixture
def mu_act(trio) -> dict[str, Any]:
    """MU-priced act (county fees off)."""
    return {
        "name": "Road Warriors",
        "useCountyTravelFee": False,
        "lineups": [{"actSize": "Trio", "bandMembers": trio}],
    }


@pytest.fixture
def northern_act(trio) -> dict[str, Any]:
    """Act with a separate northern roster (two £200 musicians from Preston)."""
    return {
        "name": "North & South",
        "useCountyTravelFee": True,
        "countyFees": {"lancashire": 30, "kent": 50},
        "useDifferentTeamForNorthernGigs": True,
        "northernTeam": [
            member("Nia", fee=200, postcode="PR1 2AA"),
            member("Olly", fee=200, postcode="PR2 3BB"),
        ],
        "lineups": [{"actSize": "Trio", "bandMembers": trio}],
    }


@pytest.fixture
def stub_client() -> StubDistanceClient:
    """Every member drives 50 miles / 1 hour each way, no tolls."""
    return StubDistanceClient(default=make_trip())
