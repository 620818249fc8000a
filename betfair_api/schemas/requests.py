"""
schemas/requests.py
--------------------

Request bodies accepted by the HTTP routes.  Operations that only take
a market filter receive a ``MarketFilter`` body directly; the models
below cover the operations with extra arguments.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from betfair_api.schemas.common import WireModel
from betfair_api.schemas.filters import MarketFilter
from betfair_api.schemas.params import PriceProjection


class TimeRangesRequest(WireModel):
    filter: MarketFilter = Field(default_factory=MarketFilter)
    granularity: str = "DAYS"
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


class MarketCatalogueRequest(WireModel):
    filter: MarketFilter = Field(default_factory=MarketFilter)
    max_results: int = Field(1, ge=1, le=1000)
    market_projection: List[str] = Field(default_factory=list)


class MarketBookRequest(WireModel):
    market_ids: List[str] = Field(..., min_length=1)
    price_projection: Optional[PriceProjection] = None
    order_projection: str = ""
    match_projection: str = ""


class RunnerBookRequest(WireModel):
    market_id: str
    selection_id: int
    price_projection: Optional[PriceProjection] = None
    order_projection: str = ""
    match_projection: str = ""
