"""
routes/betting.py
------------------

HTTP routes for the betting operations.  Each route maps its body onto
the matching :class:`BettingAPI` method and returns the typed result;
errors raised by the client are translated by the exception handler
registered in :mod:`betfair_api.main`.
"""

from __future__ import annotations

import json
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Request

from betfair_api.logging_config import logger
from betfair_api.schemas.filters import MarketFilter
from betfair_api.schemas.params import CurrentOrdersParams, PlaceInstructionParams
from betfair_api.schemas.requests import (
    MarketBookRequest,
    MarketCatalogueRequest,
    RunnerBookRequest,
    TimeRangesRequest,
)
from betfair_api.schemas.results import (
    CompetitionResult,
    CountryCodeResult,
    CurrentOrderSummaryReport,
    EventResult,
    EventTypeResult,
    MarketBook,
    MarketCatalogue,
    MarketTypeResult,
    PlaceExecutionReport,
    TimeRangeResult,
    VenueResult,
)
from betfair_api.services.betting_service import BettingAPI

router = APIRouter(prefix="/betting", tags=["betting"])


def get_betting_api(request: Request) -> BettingAPI:
    return request.app.state.betting_api


def _filter(body: Optional[MarketFilter]) -> MarketFilter:
    return body if body is not None else MarketFilter()


@router.post("/event-types", response_model=List[EventTypeResult])
def event_types(body: Optional[MarketFilter] = Body(None), api: BettingAPI = Depends(get_betting_api)):
    return api.list_event_types(_filter(body))


@router.post("/competitions", response_model=List[CompetitionResult])
def competitions(body: Optional[MarketFilter] = Body(None), api: BettingAPI = Depends(get_betting_api)):
    return api.list_competitions(_filter(body))


@router.post("/time-ranges", response_model=List[TimeRangeResult])
def time_ranges(body: TimeRangesRequest, api: BettingAPI = Depends(get_betting_api)):
    return api.list_time_ranges(body.filter, body.granularity, body.date_from, body.date_to)


@router.post("/events", response_model=List[EventResult])
def events(body: Optional[MarketFilter] = Body(None), api: BettingAPI = Depends(get_betting_api)):
    return api.list_events(_filter(body))


@router.post("/market-types", response_model=List[MarketTypeResult])
def market_types(body: Optional[MarketFilter] = Body(None), api: BettingAPI = Depends(get_betting_api)):
    return api.list_market_types(_filter(body))


@router.post("/countries", response_model=List[CountryCodeResult])
def countries(body: Optional[MarketFilter] = Body(None), api: BettingAPI = Depends(get_betting_api)):
    return api.list_countries(_filter(body))


@router.post("/venues", response_model=List[VenueResult])
def venues(body: Optional[MarketFilter] = Body(None), api: BettingAPI = Depends(get_betting_api)):
    return api.list_venues(_filter(body))


@router.post("/market-catalogue", response_model=List[MarketCatalogue])
def market_catalogue(body: MarketCatalogueRequest, api: BettingAPI = Depends(get_betting_api)):
    return api.list_market_catalogue(body.filter, body.max_results, body.market_projection)


@router.post("/market-book", response_model=List[MarketBook])
def market_book(body: MarketBookRequest, api: BettingAPI = Depends(get_betting_api)):
    return api.list_market_book(body.market_ids, body.price_projection,
                                body.order_projection, body.match_projection)


@router.post("/runner-book", response_model=List[MarketBook])
def runner_book(body: RunnerBookRequest, api: BettingAPI = Depends(get_betting_api)):
    return api.list_runner_book(body.market_id, body.selection_id, body.price_projection,
                                body.order_projection, body.match_projection)


@router.post("/current-orders", response_model=CurrentOrderSummaryReport)
def current_orders(body: Optional[CurrentOrdersParams] = Body(None), api: BettingAPI = Depends(get_betting_api)):
    return api.list_current_orders(body)


@router.post("/place-orders", response_model=PlaceExecutionReport)
def place_orders(body: PlaceInstructionParams, api: BettingAPI = Depends(get_betting_api)):
    logger.info(json.dumps({
        "event": "place_orders_request",
        "market_id": body.market_id,
        "instructions": len(body.instructions),
        "customer_ref": body.customer_ref,
    }))
    report = api.place_orders(body)
    logger.info(json.dumps({
        "event": "place_orders_response",
        "market_id": body.market_id,
        "status": report.status,
        "error_code": report.error_code,
    }))
    return report
