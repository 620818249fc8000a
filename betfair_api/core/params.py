"""
core/params.py
---------------

Pure construction of the ``params`` member of a JSON-RPC envelope.

Given a market filter and at most one parameter bag, ``build_params``
lays out the exact wire object for the remote method.  Optional fields
left at their zero value are omitted rather than sent as null or empty:
the exchange treats an absent field differently from an empty one.

A call either filters a catalogue or names markets and selections
directly.  Supplying both a filter and direct identifiers is ambiguous
for the exchange and is rejected here.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from betfair_api.schemas.filters import MarketFilter
from betfair_api.schemas.params import (
    CurrentOrdersParams,
    MarketFilterParams,
    OperationParams,
    PlaceInstructionParams,
)

LOCALE = "en"


def build_params(filter: Optional[MarketFilter], extra: Optional[OperationParams] = None) -> Dict[str, Any]:
    """Dispatch on the parameter bag and build the wire ``params`` object.

    :param filter: market filter, or ``None`` for operations addressed by id
    :param extra: one of the ``OperationParams`` bags, or ``None``
    :raises TypeError: if ``extra`` is not a known parameter bag
    :raises ValueError: if a filter is combined with direct identifiers
    :return: the ``params`` dictionary
    """
    match extra:
        case None:
            return {"filter": (filter or MarketFilter()).to_wire(), "locale": LOCALE}
        case MarketFilterParams():
            return build_list_params(filter, extra)
        case CurrentOrdersParams():
            _reject_filter(filter, "listCurrentOrders")
            return build_current_orders_params(extra)
        case PlaceInstructionParams():
            _reject_filter(filter, "placeOrders")
            return build_place_params(extra)
        case _:
            raise TypeError(f"unsupported parameter bag: {type(extra).__name__}")


def _reject_filter(filter: Optional[MarketFilter], operation: str) -> None:
    if filter is not None:
        raise ValueError(f"{operation} does not accept a market filter")


def build_list_params(filter: Optional[MarketFilter], bag: MarketFilterParams) -> Dict[str, Any]:
    """Filter plus the non-zero fields of a list-style bag."""
    if filter is not None and (bag.market_id or bag.market_ids or bag.selection_id):
        raise ValueError("a market filter cannot be combined with market or selection ids")

    params: Dict[str, Any] = {}
    if filter is not None:
        params["filter"] = filter.to_wire()
    if bag.granularity:
        params["granularity"] = bag.granularity
    if bag.market_id:
        params["marketId"] = bag.market_id
    if bag.market_ids:
        params["marketIds"] = list(bag.market_ids)
    if bag.selection_id:
        params["selectionId"] = bag.selection_id
    if bag.market_projection:
        params["marketProjection"] = list(bag.market_projection)
    if bag.max_results:
        params["maxResults"] = bag.max_results
    if bag.match_projection:
        params["matchProjection"] = bag.match_projection
    if bag.order_projection:
        params["orderProjection"] = bag.order_projection
    if bag.price_projection is not None:
        params["priceProjection"] = bag.price_projection.to_wire()
    if bag.date_range is not None:
        params["dateRange"] = bag.date_range.to_wire()
    params["locale"] = LOCALE
    return params


def build_current_orders_params(bag: CurrentOrdersParams) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if bag.bet_ids:
        params["betIds"] = list(bag.bet_ids)
    if bag.market_ids:
        params["marketIds"] = list(bag.market_ids)
    if bag.order_projection:
        params["orderProjection"] = bag.order_projection
    if bag.date_range is not None:
        params["dateRange"] = bag.date_range.to_wire()
    if bag.order_by:
        params["orderBy"] = bag.order_by
    if bag.sort_dir:
        params["sortDir"] = bag.sort_dir
    if bag.from_record:
        params["fromRecord"] = bag.from_record
    if bag.record_count:
        params["recordCount"] = bag.record_count
    params["locale"] = LOCALE
    return params


def build_place_params(bag: PlaceInstructionParams) -> Dict[str, Any]:
    """Market id, references and instructions; never a filter."""
    params: Dict[str, Any] = {}
    if bag.market_id:
        params["marketId"] = bag.market_id
    if bag.customer_ref:
        params["customerRef"] = bag.customer_ref
    if bag.customer_strategy_ref:
        params["customerStrategyRef"] = bag.customer_strategy_ref
    if bag.instructions:
        params["instructions"] = [instruction.to_wire() for instruction in bag.instructions]
    params["locale"] = LOCALE
    return params
