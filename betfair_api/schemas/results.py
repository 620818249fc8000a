"""
schemas/results.py
-------------------

Typed result wrappers for each operation.  The envelope's ``result``
member is untyped; the facade re-decodes it into one of these models.
Every field has a default so that partial payloads still decode.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from betfair_api.schemas.common import WireModel
from betfair_api.schemas.filters import TimeRange
from betfair_api.schemas.params import PlaceInstruction


class EventType(WireModel):
    id: str = ""
    name: str = ""


class Competition(WireModel):
    id: str = ""
    name: str = ""


class Event(WireModel):
    id: str = ""
    name: str = ""
    country_code: Optional[str] = None
    timezone: Optional[str] = None
    venue: Optional[str] = None
    open_date: Optional[str] = None


class EventTypeResult(WireModel):
    event_type: Optional[EventType] = None
    market_count: int = 0


class CompetitionResult(WireModel):
    competition: Optional[Competition] = None
    market_count: int = 0
    competition_region: Optional[str] = None


class TimeRangeResult(WireModel):
    time_range: Optional[TimeRange] = None
    market_count: int = 0


class EventResult(WireModel):
    event: Optional[Event] = None
    market_count: int = 0


class MarketTypeResult(WireModel):
    market_type: str = ""
    market_count: int = 0


class CountryCodeResult(WireModel):
    country_code: str = ""
    market_count: int = 0


class VenueResult(WireModel):
    venue: str = ""
    market_count: int = 0


class RunnerCatalog(WireModel):
    selection_id: int = 0
    runner_name: str = ""
    handicap: float = 0.0
    sort_priority: int = 0
    metadata: Optional[Dict[str, Optional[str]]] = None


class MarketCatalogue(WireModel):
    market_id: str = ""
    market_name: str = ""
    market_start_time: Optional[str] = None
    total_matched: float = 0.0
    runners: List[RunnerCatalog] = Field(default_factory=list)
    event_type: Optional[EventType] = None
    competition: Optional[Competition] = None
    event: Optional[Event] = None


class PriceSize(WireModel):
    price: float = 0.0
    size: float = 0.0


class ExchangePrices(WireModel):
    available_to_back: List[PriceSize] = Field(default_factory=list)
    available_to_lay: List[PriceSize] = Field(default_factory=list)
    traded_volume: List[PriceSize] = Field(default_factory=list)


class Runner(WireModel):
    selection_id: int = 0
    handicap: float = 0.0
    status: str = ""
    last_price_traded: Optional[float] = None
    total_matched: float = 0.0
    ex: ExchangePrices = Field(default_factory=ExchangePrices)


class MarketBook(WireModel):
    market_id: str = ""
    is_market_data_delayed: bool = False
    status: str = ""
    bet_delay: int = 0
    bsp_reconciled: bool = False
    complete: bool = False
    inplay: bool = False
    number_of_winners: int = 0
    number_of_runners: int = 0
    number_of_active_runners: int = 0
    last_match_time: Optional[str] = None
    total_matched: float = 0.0
    total_available: float = 0.0
    cross_matching: bool = False
    runners_voidable: bool = False
    version: int = 0
    runners: List[Runner] = Field(default_factory=list)


class CurrentOrderSummary(WireModel):
    bet_id: str = ""
    market_id: str = ""
    selection_id: int = 0
    handicap: float = 0.0
    price_size: Optional[PriceSize] = None
    bsp_liability: float = 0.0
    side: str = ""
    status: str = ""
    persistence_type: str = ""
    order_type: str = ""
    placed_date: Optional[str] = None
    matched_date: Optional[str] = None
    average_price_matched: float = 0.0
    size_matched: float = 0.0
    size_remaining: float = 0.0
    size_lapsed: float = 0.0
    size_cancelled: float = 0.0
    size_voided: float = 0.0
    regulator_code: Optional[str] = None
    customer_order_ref: Optional[str] = None
    customer_strategy_ref: Optional[str] = None


class CurrentOrderSummaryReport(WireModel):
    current_orders: List[CurrentOrderSummary] = Field(default_factory=list)
    more_available: bool = False


class PlaceInstructionReport(WireModel):
    status: str = ""
    error_code: Optional[str] = None
    order_status: Optional[str] = None
    instruction: Optional[PlaceInstruction] = None
    bet_id: Optional[str] = None
    placed_date: Optional[str] = None
    average_price_matched: Optional[float] = None
    size_matched: Optional[float] = None


class PlaceExecutionReport(WireModel):
    customer_ref: Optional[str] = None
    status: str = ""
    error_code: Optional[str] = None
    market_id: str = ""
    instruction_reports: List[PlaceInstructionReport] = Field(default_factory=list)
