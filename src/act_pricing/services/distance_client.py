"""Distance client — adapter for the travel-data HTTP endpoint.

Contract: ``GET {base_url}/travel-data?origin=&destination=&date=YYYY-MM-DD``
answering ``{"outbound": {...}, "returnTrip": {...}}``.  Older deployments
answer with a Distance-Matrix style ``{"rows": [{"elements": [...]}]}``
body; both are normalized to ``TripData``.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from act_pricing.config.coerce import coerce_number
from act_pricing.config.settings import settings
from act_pricing.models.results import TravelLeg, TripData

logger = logging.getLogger(__name__)


class DistanceClientError(Exception):
    """Travel lookup failed (transport error, non-2xx, or non-JSON body)."""


class DistanceClient(Protocol):
    def fetch_trip(self, origin: str, destination: str, event_date: str) -> TripData:
        ...


def _leg_from_payload(raw: Any) -> TravelLeg | None:
    if not isinstance(raw, dict):
        return None
    distance = raw.get("distance") or {}
    duration = raw.get("duration") or {}
    fare = raw.get("fare") or {}
    return TravelLeg(
        distance_meters=coerce_number(distance.get("value") if isinstance(distance, dict) else distance),
        duration_seconds=coerce_number(duration.get("value") if isinstance(duration, dict) else duration),
        fare=coerce_number(fare.get("value") if isinstance(fare, dict) else fare),
    )


def normalize_trip_payload(data: Any) -> TripData:
    """Map either response shape onto ``TripData``."""
    if not isinstance(data, dict):
        return TripData()

    outbound = _leg_from_payload(data.get("outbound"))
    if outbound is None:
        rows = data.get("rows") or []
        elements = (rows[0].get("elements") or []) if rows and isinstance(rows[0], dict) else []
        first = elements[0] if elements else None
        if isinstance(first, dict) and first.get("distance") and first.get("duration"):
            outbound = _leg_from_payload(first)

    return TripData(outbound=outbound, return_trip=_leg_from_payload(data.get("returnTrip")))


class HttpDistanceClient:
    """Synchronous client for the travel-data endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or settings.travel_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.travel_api_timeout_seconds
        self._session = session or requests.Session()

    def fetch_trip(self, origin: str, destination: str, event_date: str) -> TripData:
        url = f"{self.base_url}/travel-data"
        params = {"origin": origin, "destination": destination, "date": event_date}
        try:
            resp = self._session.get(
                url, params=params, headers={"Accept": "application/json"}, timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise DistanceClientError(f"travel request failed: {e}") from e

        try:
            data = resp.json() if resp.content else {}
        except ValueError:
            data = None

        if not resp.ok:
            detail = ""
            if isinstance(data, dict):
                detail = data.get("detail") or data.get("error") or data.get("message") or ""
            raise DistanceClientError(f"travel {resp.status_code} - {detail or resp.reason}")
        if data is None:
            raise DistanceClientError("travel response was not JSON")

        trip = normalize_trip_payload(data)
        logger.debug(f"Travel data {origin} → {destination}: outbound={trip.outbound is not None} "
                     f"return={trip.return_trip is not None}")
        return trip
