"""FastAPI server — pricing and travel-data API for the booking site.

Run with:
    uvicorn act_pricing.api.server:app --reload --port 8000

Endpoints:
    GET  /health              — liveness probe
    GET  /travel-data         — both legs between two places (cached Distance Matrix)
    POST /pricing/quote       — client-facing price for an act, place and date
    POST /pricing/member-fee  — fee quoted to one musician
    POST /pricing/card        — listing-card "from" price + travel summary
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from act_pricing.config.settings import settings
from act_pricing.engine.card import compute_card_base_price, travel_summary
from act_pricing.engine.member_fee import compute_member_fee
from act_pricing.engine.pricing import calculate_act_pricing
from act_pricing.api.narrative import generate_quote_narrative
from act_pricing.services.distance_client import DistanceClient, HttpDistanceClient
from act_pricing.services.travel_data import TravelDataError, TravelDataService

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logging.getLogger("urllib3").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Act Pricing API",
    version="1.0",
    description=(
        "Quotes client-facing prices for acts (base fees, county or MU travel, "
        "margin) and serves cached travel data between postcodes."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_distance_client() -> DistanceClient:
    return HttpDistanceClient()


@lru_cache
def get_travel_data_service() -> TravelDataService:
    return TravelDataService()


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class QuoteRequest(BaseModel):
    """Request body for /pricing/quote. Field names follow the booking frontend."""
    act: dict[str, Any] | None = Field(default=None, description="Act document (lineups, countyFees, flags ...)")
    selectedCounty: str | None = None
    selectedAddress: str | dict[str, Any] | None = Field(
        default=None, description="Venue address string or {postcode, formattedAddress, ...}",
    )
    selectedDate: str | None = Field(default=None, description="Event date, YYYY-MM-DD")
    selectedLineup: dict[str, Any] | None = None


class QuoteResponse(BaseModel):
    result: dict[str, Any]
    narrative: str = ""


class MemberFeeRequest(BaseModel):
    act: dict[str, Any]
    lineup: dict[str, Any]
    member: dict[str, Any]
    address: str | dict[str, Any] | None = None
    dateISO: str | None = None


class CardRequest(BaseModel):
    act: dict[str, Any]


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Act Pricing API",
        "version": "1.0",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/travel-data")
def travel_data(
    origin: str | None = Query(default=None, description="Origin postcode or address"),
    destination: str | None = Query(default=None, description="Destination postcode or address"),
    date: str | None = Query(default=None, description="Event date (accepted, not used for routing)"),
    service: TravelDataService = Depends(get_travel_data_service),
):
    """Outbound and return legs between ``origin`` and ``destination``."""
    try:
        return service.get_travel_data(origin, destination)
    except TravelDataError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@app.post("/pricing/quote", response_model=QuoteResponse)
def pricing_quote(req: QuoteRequest, client: DistanceClient = Depends(get_distance_client)):
    """Price an act for a venue and date.

    Example minimal request:
    ```json
    {"act": {"lineups": [{"actSize": "Duo", "bandMembers": [{"isEssential": true, "fee": 300}]}]},
     "selectedAddress": "Maidstone ME14 1XX", "selectedDate": "2026-06-20"}
    ```
    """
    result = calculate_act_pricing(
        req.act,
        req.selectedCounty,
        req.selectedAddress,
        req.selectedDate,
        req.selectedLineup,
        distance_client=client,
    )
    logger.info(f"Quote: total={result.total} decision={result.decision} county={result.county or '-'}")
    return QuoteResponse(
        result=result.model_dump(by_alias=True),
        narrative=generate_quote_narrative(result),
    )


@app.post("/pricing/member-fee")
def pricing_member_fee(req: MemberFeeRequest, client: DistanceClient = Depends(get_distance_client)):
    """Fee quoted to one musician in an availability request."""
    result = compute_member_fee(
        req.act, req.lineup, req.member, req.address, req.dateISO, distance_client=client,
    )
    return result.model_dump(by_alias=True)


@app.post("/pricing/card")
def pricing_card(req: CardRequest):
    """Listing-card base price and travel summary for an act."""
    return {
        "card": compute_card_base_price(req.act).model_dump(by_alias=True),
        "travel": travel_summary(req.act).model_dump(by_alias=True),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("act_pricing.api.server:app", host="0.0.0.0", port=8000, reload=True)
