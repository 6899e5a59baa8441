"""Travel-data service — cached Google Distance Matrix lookups.

Serves the ``/travel-data`` contract the pricing engine consumes.  Each
direction of a trip is cached separately in Redis as a route between two
normalized place strings; entries expire after the staleness window and
are then refreshed from Google.  When Redis is unreachable every lookup
goes to Google.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any

import redis
import requests

from act_pricing.config.settings import settings

logger = logging.getLogger(__name__)

ROUTE_KEY_PREFIX = "travel:route"


class TravelDataError(Exception):
    """Request-level failure carrying the HTTP status to answer with."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@dataclass
class CachedRoute:
    origin: str
    destination: str
    distance_km: float
    duration_minutes: float


class RouteCache:
    """Redis-backed route store keyed by ``(origin, destination)``."""

    def __init__(
        self,
        client: redis.Redis | None = None,
        ttl_seconds: int | None = None,
        url: str | None = None,
    ):
        self._redis = client
        self._url = url or settings.redis_url
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.travel_cache_stale_minutes * 60

    def _get_redis(self) -> redis.Redis | None:
        if self._redis is None:
            try:
                self._redis = redis.from_url(self._url, encoding="utf-8", decode_responses=True)
                self._redis.ping()
            except (redis.RedisError, ValueError) as e:
                logger.warning(f"Redis unavailable, route cache disabled: {e}")
                self._redis = None
        return self._redis

    @staticmethod
    def key(origin: str, destination: str) -> str:
        return f"{ROUTE_KEY_PREFIX}:{origin}:{destination}"

    def get(self, origin: str, destination: str) -> CachedRoute | None:
        """Cached route, or None on a miss, an expired entry, or a Redis error."""
        r = self._get_redis()
        if r is None:
            return None
        try:
            raw = r.get(self.key(origin, destination))
        except redis.RedisError as e:
            logger.warning(f"Route cache read failed for {origin} → {destination}: {e}")
            return None
        if not raw:
            return None
        try:
            return CachedRoute(**json.loads(raw))
        except (TypeError, ValueError):
            logger.warning(f"Discarding malformed cached route {origin} → {destination}")
            return None

    def put(self, route: CachedRoute) -> bool:
        r = self._get_redis()
        if r is None:
            return False
        try:
            r.setex(self.key(route.origin, route.destination), self.ttl_seconds, json.dumps(asdict(route)))
        except redis.RedisError as e:
            logger.warning(f"Route cache write failed for {route.origin} → {route.destination}: {e}")
            return False
        return True


def normalize_place(value: Any) -> str:
    return str(value or "").strip().upper()


def _leg_payload(route: CachedRoute) -> dict[str, Any]:
    return {
        "distance": {
            "text": f"{route.distance_km:.1f} km",
            "value": round(route.distance_km * 1000),
        },
        "duration": {
            "text": f"{round(route.duration_minutes)} mins",
            "value": round(route.duration_minutes * 60),
        },
        "fare": None,
    }


class TravelDataService:
    """Answers travel-data requests from the route cache, falling back to Google."""

    def __init__(
        self,
        api_key: str | None = None,
        stale_minutes: int | None = None,
        session: requests.Session | None = None,
        cache: RouteCache | None = None,
        matrix_url: str | None = None,
        timeout: float | None = None,
    ):
        self.api_key = settings.google_maps_api_key if api_key is None else api_key
        self.stale_minutes = settings.travel_cache_stale_minutes if stale_minutes is None else stale_minutes
        self.matrix_url = matrix_url or settings.google_distance_matrix_url
        self.timeout = timeout if timeout is not None else settings.travel_api_timeout_seconds
        self.cache = cache if cache is not None else RouteCache(ttl_seconds=self.stale_minutes * 60)
        self._session = session or requests.Session()

    def get_travel_data(self, origin: Any, destination: Any) -> dict[str, Any]:
        """Both legs between ``origin`` and ``destination`` plus their sources."""
        if not origin or not destination:
            raise TravelDataError(400, "Missing origin or destination")

        start = normalize_place(origin)
        end = normalize_place(destination)

        outbound, outbound_source = self._route(start, end, "outbound")
        back, return_source = self._route(end, start, "return")

        logger.info(
            f"Travel data {start} ↔ {end}: outbound {outbound.distance_km:.1f} km ({outbound_source}), "
            f"return {back.distance_km:.1f} km ({return_source})"
        )
        return {
            "outbound": _leg_payload(outbound),
            "returnTrip": _leg_payload(back),
            "sources": {"outbound": outbound_source, "return": return_source},
        }

    def _route(self, origin: str, destination: str, label: str) -> tuple[CachedRoute, str]:
        cached = self.cache.get(origin, destination)
        if cached is not None:
            return cached, "db"

        if not self.api_key:
            raise TravelDataError(503, "Google API key not configured")

        logger.info(f"Fetching {label} route {origin} → {destination} from Google Distance Matrix")
        element = self._fetch_element(origin, destination)
        if not element or element.get("status") != "OK":
            logger.warning(f"No valid {label} route found for {origin} → {destination}")
            raise TravelDataError(400, f"No route found ({label}).")

        distance_m = (element.get("distance") or {}).get("value") or 0
        duration_s = (element.get("duration") or {}).get("value") or 0
        route = CachedRoute(
            origin=origin,
            destination=destination,
            distance_km=distance_m / 1000,
            duration_minutes=duration_s / 60,
        )
        self.cache.put(route)
        return route, "google"

    def _fetch_element(self, origin: str, destination: str) -> dict[str, Any] | None:
        try:
            resp = self._session.get(
                self.matrix_url,
                params={"origins": origin, "destinations": destination, "key": self.api_key},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Distance Matrix request failed for {origin} → {destination}: {e}")
            raise TravelDataError(502, "Distance lookup failed") from e

        rows = data.get("rows") or []
        elements = (rows[0].get("elements") or []) if rows else []
        return elements[0] if elements else None
