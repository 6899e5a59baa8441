"""External collaborators — travel-data client and server-side lookup service."""

from act_pricing.services.distance_client import (
    DistanceClient,
    DistanceClientError,
    HttpDistanceClient,
    normalize_trip_payload,
)
from act_pricing.services.travel_data import RouteCache, TravelDataError, TravelDataService

__all__ = [
    "DistanceClient",
    "DistanceClientError",
    "HttpDistanceClient",
    "normalize_trip_payload",
    "RouteCache",
    "TravelDataError",
    "TravelDataService",
]
