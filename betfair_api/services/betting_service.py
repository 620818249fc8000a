"""
services/betting_service.py
---------------------------

Typed facade over the transport client: one method per remote
operation.  Each method picks the operation name and parameter bag,
calls :meth:`JsonRPCClient.invoke` and decodes the raw result into the
operation's result model.  No business rules are checked here; the
exchange enforces its own.

Decoding is best effort by default.  A payload that does not match the
expected shape yields an empty result (``[]`` or an empty report) and a
WARNING log entry instead of an exception.  Pass ``strict_decode=True``
to get :class:`DecodeError` instead.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from betfair_api.clients.jsonrpc_client import JsonRPCClient
from betfair_api.core.context import Deadline
from betfair_api.core.errors import DecodeError
from betfair_api.logging_config import log_call, logger
from betfair_api.schemas.filters import MarketFilter, TimeRange
from betfair_api.schemas.params import (
    CurrentOrdersParams,
    MarketFilterParams,
    PlaceInstructionParams,
    PriceProjection,
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

RPC_ID = 1

T = TypeVar("T")


def format_wire_time(value: datetime) -> str:
    """RFC 3339 with second precision; UTC is written as ``Z``.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def time_range(date_from: Optional[datetime] = None, date_to: Optional[datetime] = None) -> Optional[TimeRange]:
    """Build a ``TimeRange`` from optional bounds, ``None`` when both are missing."""
    if date_from is None and date_to is None:
        return None
    return TimeRange(
        from_=format_wire_time(date_from) if date_from is not None else "",
        to=format_wire_time(date_to) if date_to is not None else "",
    )


class BettingAPI:
    """Typed Betfair Betting API.

    :param client: an authenticated (or soon to be) transport client
    :param strict_decode: raise ``DecodeError`` on malformed results
        instead of returning empty ones
    """

    def __init__(self, client: JsonRPCClient, *, strict_decode: bool = False) -> None:
        self.client = client
        self.strict_decode = strict_decode

    def _decode(self, method: str, raw: bytes, adapter: TypeAdapter[T], empty: Callable[[], T]) -> T:
        try:
            return adapter.validate_json(raw)
        except ValidationError as exc:
            if self.strict_decode:
                raise DecodeError(f"unable to decode {method} result: {exc}") from exc
            logger.warning(json.dumps({
                "event": "decode_failed",
                "method": method,
                "errors": exc.error_count(),
                "detail": "returning empty result",
            }))
            return empty()

    def _call(self, method: str, filter: Optional[MarketFilter], extra: Any,
              adapter: TypeAdapter[T], empty: Callable[[], T], deadline: Optional[Deadline]) -> T:
        raw = self.client.invoke(RPC_ID, method, filter, extra, deadline=deadline)
        return self._decode(method, raw, adapter, empty)

    @log_call
    def list_event_types(self, filter: Optional[MarketFilter] = None, *,
                         deadline: Optional[Deadline] = None) -> List[EventTypeResult]:
        return self._call("listEventTypes", filter or MarketFilter(), None,
                          _EVENT_TYPES, list, deadline)

    @log_call
    def list_competitions(self, filter: Optional[MarketFilter] = None, *,
                          deadline: Optional[Deadline] = None) -> List[CompetitionResult]:
        return self._call("listCompetitions", filter or MarketFilter(), None,
                          _COMPETITIONS, list, deadline)

    @log_call
    def list_time_ranges(
        self,
        filter: Optional[MarketFilter] = None,
        granularity: str = "DAYS",
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> List[TimeRangeResult]:
        """Number of markets per time bucket.

        ``marketStartTime`` is derived from ``date_from``/``date_to`` and set
        on a copy of ``filter`` only when at least one bound is given; the
        caller's filter is left untouched.
        """
        filter = filter or MarketFilter()
        market_start_time = time_range(date_from, date_to)
        if market_start_time is not None:
            filter = filter.model_copy(update={"market_start_time": market_start_time})
        return self._call("listTimeRanges", filter, MarketFilterParams(granularity=granularity),
                          _TIME_RANGES, list, deadline)

    @log_call
    def list_events(self, filter: Optional[MarketFilter] = None, *,
                    deadline: Optional[Deadline] = None) -> List[EventResult]:
        return self._call("listEvents", filter or MarketFilter(), None,
                          _EVENTS, list, deadline)

    @log_call
    def list_market_types(self, filter: Optional[MarketFilter] = None, *,
                          deadline: Optional[Deadline] = None) -> List[MarketTypeResult]:
        return self._call("listMarketTypes", filter or MarketFilter(), None,
                          _MARKET_TYPES, list, deadline)

    @log_call
    def list_countries(self, filter: Optional[MarketFilter] = None, *,
                       deadline: Optional[Deadline] = None) -> List[CountryCodeResult]:
        return self._call("listCountries", filter or MarketFilter(), None,
                          _COUNTRIES, list, deadline)

    @log_call
    def list_venues(self, filter: Optional[MarketFilter] = None, *,
                    deadline: Optional[Deadline] = None) -> List[VenueResult]:
        return self._call("listVenues", filter or MarketFilter(), None,
                          _VENUES, list, deadline)

    @log_call
    def list_market_catalogue(
        self,
        filter: Optional[MarketFilter] = None,
        max_results: int = 1,
        market_projection: Optional[List[str]] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> List[MarketCatalogue]:
        params = MarketFilterParams(max_results=max_results, market_projection=market_projection or [])
        return self._call("listMarketCatalogue", filter or MarketFilter(), params,
                          _CATALOGUE, list, deadline)

    @log_call
    def list_market_book(
        self,
        market_ids: List[str],
        price_projection: Optional[PriceProjection] = None,
        order_projection: str = "",
        match_projection: str = "",
        *,
        deadline: Optional[Deadline] = None,
    ) -> List[MarketBook]:
        params = MarketFilterParams(
            market_ids=market_ids,
            price_projection=price_projection,
            order_projection=order_projection,
            match_projection=match_projection,
        )
        return self._call("listMarketBook", None, params, _BOOKS, list, deadline)

    @log_call
    def list_runner_book(
        self,
        market_id: str,
        selection_id: int,
        price_projection: Optional[PriceProjection] = None,
        order_projection: str = "",
        match_projection: str = "",
        *,
        deadline: Optional[Deadline] = None,
    ) -> List[MarketBook]:
        params = MarketFilterParams(
            market_id=market_id,
            selection_id=selection_id,
            price_projection=price_projection,
            order_projection=order_projection,
            match_projection=match_projection,
        )
        return self._call("listRunnerBook", None, params, _BOOKS, list, deadline)

    @log_call
    def list_current_orders(
        self,
        params: Optional[CurrentOrdersParams] = None,
        *,
        deadline: Optional[Deadline] = None,
    ) -> CurrentOrderSummaryReport:
        return self._call("listCurrentOrders", None, params or CurrentOrdersParams(),
                          _CURRENT_ORDERS, CurrentOrderSummaryReport, deadline)

    @log_call
    def place_orders(self, params: PlaceInstructionParams, *,
                     deadline: Optional[Deadline] = None) -> PlaceExecutionReport:
        return self._call("placeOrders", None, params,
                          _PLACE_REPORT, PlaceExecutionReport, deadline)


_EVENT_TYPES = TypeAdapter(List[EventTypeResult])
_COMPETITIONS = TypeAdapter(List[CompetitionResult])
_TIME_RANGES = TypeAdapter(List[TimeRangeResult])
_EVENTS = TypeAdapter(List[EventResult])
_MARKET_TYPES = TypeAdapter(List[MarketTypeResult])
_COUNTRIES = TypeAdapter(List[CountryCodeResult])
_VENUES = TypeAdapter(List[VenueResult])
_CATALOGUE = TypeAdapter(List[MarketCatalogue])
_BOOKS = TypeAdapter(List[MarketBook])
_CURRENT_ORDERS = TypeAdapter(CurrentOrderSummaryReport)
_PLACE_REPORT = TypeAdapter(PlaceExecutionReport)
