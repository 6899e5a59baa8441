"""Test doubles and document builders shared across test modules."""

from __future__ import annotations

from typing import Any

import redis
import requests

from act_pricing.models.results import TravelLeg, TripData
from act_pricing.services.distance_client import DistanceClientError


class StubDistanceClient:
    """Returns a fixed trip per origin postcode and records every call."""

    def __init__(self, trips: dict[str, TripData] | None = None, default: TripData | None = None,
                 failing: set[str] | None = None):
        self.trips = trips or {}
        self.default = default
        self.failing = failing or set()
        self.calls: list[tuple[str, str, str]] = []

    def fetch_trip(self, origin: str, destination: str, event_date: str) -> TripData:
        self.calls.append((origin, destination, event_date))
        if origin in self.failing:
            raise DistanceClientError(f"travel 500 - lookup failed for {origin}")
        if origin in self.trips:
            return self.trips[origin]
        if self.default is not None:
            return self.default
        return TripData()


def make_trip(
    out_miles: float = 50.0,
    out_hours: float = 1.0,
    ret_miles: float = 50.0,
    ret_hours: float = 1.0,
    out_fare: float = 0.0,
    ret_fare: float = 0.0,
) -> TripData:
    return TripData(
        outbound=TravelLeg(distance_meters=out_miles * 1609.34, duration_seconds=out_hours * 3600, fare=out_fare),
        return_trip=TravelLeg(distance_meters=ret_miles * 1609.34, duration_seconds=ret_hours * 3600, fare=ret_fare),
    )


def member(first: str, fee: float = 300, essential: bool = True, postcode: str | None = "ME14 1XX",
           **extra: Any) -> dict[str, Any]:
    doc: dict[str, Any] = {"firstName": first, "fee": fee, "isEssential": essential, "instrument": "Guitar"}
    if postcode:
        doc["postCode"] = postcode
    doc.update(extra)
    return doc


class FakeResponse:
    """Just enough of ``requests.Response`` for the HTTP clients."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None, reason: str = ""):
        self.status_code = status_code
        self._payload = payload
        self._text = text
        self.reason = reason or ("OK" if status_code < 400 else "Error")

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def content(self) -> bytes:
        if self._text is not None:
            return self._text.encode()
        return b"" if self._payload is None else b"{...}"

    def json(self) -> Any:
        if self._text is not None:
            raise ValueError("not JSON")
        return self._payload

    def raise_for_status(self) -> None:
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} {self.reason}")


class FakeSession:
    """Hands out queued responses (or raises queued exceptions) and records each GET."""

    def __init__(self, *responses: Any):
        self.responses = list(responses)
        self.requests: list[dict[str, Any]] = []

    def get(self, url: str, params: dict | None = None, **kwargs: Any) -> FakeResponse:
        self.requests.append({"url": url, "params": params or {}, **kwargs})
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, Exception):
            raise item
        return item


class FakeRedis:
    """In-memory stand-in for a redis-py client; ``setex`` entries expire when ``now`` passes them."""

    def __init__(self):
        self.now = 0.0
        self.store: dict[str, tuple[str, float]] = {}
        self.setex_calls: list[tuple[str, int]] = []

    def ping(self) -> bool:
        return True

    def get(self, key: str) -> str | None:
        entry = self.store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.now >= expires_at:
            del self.store[key]
            return None
        return value

    def setex(self, key: str, ttl: int, value: str) -> bool:
        self.setex_calls.append((key, ttl))
        self.store[key] = (value, self.now + ttl)
        return True


class BrokenRedis:
    """Redis client whose server is down."""

    def ping(self) -> bool:
        raise redis.ConnectionError("Connection refused")

    def get(self, key: str) -> str | None:
        raise redis.ConnectionError("Connection refused")

    def setex(self, key: str, ttl: int, value: str) -> bool:
        raise redis.ConnectionError("Connection refused")


class ExplodingDistanceClient:
    """A distance client whose lookups fail with an unexpected error."""

    def fetch_trip(self, origin: str, destination: str, event_date: str) -> TripData:
        raise RuntimeError(f"connection reset while looking up {origin}")
