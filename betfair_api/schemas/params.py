"""
schemas/params.py
------------------

Operation-specific parameter bags merged into the ``params`` member of
an outbound envelope.  The set is closed: ``OperationParams`` lists
every bag the parameter builder knows how to lay out, and exactly one
of them (or none) accompanies a call.

Zero values mean "not supplied".  The builder leaves such fields off
the wire entirely.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from betfair_api.schemas.common import WireModel
from betfair_api.schemas.filters import TimeRange


class PriceProjection(WireModel):
    price_data: List[str] = Field(default_factory=list)
    virtualise: Optional[bool] = None
    rollover_stakes: Optional[bool] = None


class MarketFilterParams(WireModel):
    """List-style bag used by catalogue, time range and book operations."""

    granularity: str = ""
    max_results: int = 0
    market_id: str = ""
    market_ids: List[str] = Field(default_factory=list)
    selection_id: int = 0
    market_projection: List[str] = Field(default_factory=list)
    price_projection: Optional[PriceProjection] = None
    order_projection: str = ""
    match_projection: str = ""
    date_range: Optional[TimeRange] = None


class CurrentOrdersParams(WireModel):
    bet_ids: List[str] = Field(default_factory=list)
    market_ids: List[str] = Field(default_factory=list)
    order_projection: str = ""
    date_range: Optional[TimeRange] = None
    order_by: str = ""
    sort_dir: str = ""
    from_record: int = 0
    record_count: int = 0


class LimitOrder(WireModel):
    size: float
    price: float
    persistence_type: str = "LAPSE"
    time_in_force: Optional[str] = None
    min_fill_size: Optional[float] = None
    bet_target_type: Optional[str] = None
    bet_target_size: Optional[float] = None


class LimitOnCloseOrder(WireModel):
    liability: float
    price: float


class MarketOnCloseOrder(WireModel):
    liability: float


class PlaceInstruction(WireModel):
    order_type: str = "LIMIT"
    selection_id: int
    handicap: float = 0.0
    side: str
    limit_order: Optional[LimitOrder] = None
    limit_on_close_order: Optional[LimitOnCloseOrder] = None
    market_on_close_order: Optional[MarketOnCloseOrder] = None
    customer_order_ref: Optional[str] = None


class PlaceInstructionParams(WireModel):
    market_id: str = ""
    instructions: List[PlaceInstruction] = Field(default_factory=list)
    customer_ref: str = ""
    customer_strategy_ref: str = ""


OperationParams = Union[MarketFilterParams, CurrentOrdersParams, PlaceInstructionParams]
