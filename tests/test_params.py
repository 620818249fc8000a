import pytest

from betfair_api.core.params import build_params
from betfair_api.schemas.filters import MarketFilter, TimeRange
from betfair_api.schemas.params import (
    CurrentOrdersParams,
    LimitOrder,
    MarketFilterParams,
    PlaceInstruction,
    PlaceInstructionParams,
    PriceProjection,
)


def test_filter_only_yields_filter_and_locale():
    params = build_params(MarketFilter(event_ids=["1"]))
    assert params == {"filter": {"eventIds": ["1"]}, "locale": "en"}


def test_missing_filter_without_bag_sends_empty_filter():
    assert build_params(None) == {"filter": {}, "locale": "en"}


def test_market_parameters_supplied():
    bag = MarketFilterParams(
        granularity="DAY",
        max_results=1,
        market_ids=["123", "456", "678"],
        market_projection=["EVENT"],
        price_projection=PriceProjection(price_data=["EX_BEST_OFFERS"]),
        order_projection="EXECUTABLE",
        match_projection="ROLLED_UP_BY_AVG_PRICE",
    )
    assert build_params(None, bag) == {
        "granularity": "DAY",
        "maxResults": 1,
        "marketIds": ["123", "456", "678"],
        "marketProjection": ["EVENT"],
        "priceProjection": {"priceData": ["EX_BEST_OFFERS"]},
        "orderProjection": "EXECUTABLE",
        "matchProjection": "ROLLED_UP_BY_AVG_PRICE",
        "locale": "en",
    }


def test_zero_valued_bag_fields_are_omitted():
    params = build_params(MarketFilter(text_query="Premier League"), MarketFilterParams())
    assert params == {"filter": {"textQuery": "Premier League"}, "locale": "en"}


def test_catalogue_bag_keeps_filter():
    bag = MarketFilterParams(max_results=10, market_projection=["RUNNER_METADATA"])
    params = build_params(MarketFilter(market_type_codes=["MATCH_ODDS"]), bag)
    assert params == {
        "filter": {"marketTypeCodes": ["MATCH_ODDS"]},
        "maxResults": 10,
        "marketProjection": ["RUNNER_METADATA"],
        "locale": "en",
    }


def test_runner_book_bag():
    bag = MarketFilterParams(market_id="1.234", selection_id=47972)
    assert build_params(None, bag) == {"marketId": "1.234", "selectionId": 47972, "locale": "en"}


def test_date_range_is_sent_when_present():
    bag = MarketFilterParams(date_range=TimeRange(to="2024-01-01T00:00:00Z"))
    assert build_params(None, bag)["dateRange"] == {"to": "2024-01-01T00:00:00Z"}


@pytest.mark.parametrize("bag", [
    MarketFilterParams(market_id="1.234"),
    MarketFilterParams(market_ids=["1.234"]),
    MarketFilterParams(selection_id=7),
])
def test_filter_with_direct_ids_is_rejected(bag):
    with pytest.raises(ValueError):
        build_params(MarketFilter(event_ids=["1"]), bag)


def test_filter_flags_and_empty_lists_are_dropped():
    market_filter = MarketFilter(
        event_type_ids=["1"],
        in_play_only=True,
        bsp_only=False,
        venues=[],
        market_start_time=TimeRange(),
    )
    assert market_filter.to_wire() == {"eventTypeIds": ["1"], "inPlayOnly": True}


def test_current_orders_params():
    bag = CurrentOrdersParams(market_ids=["1.1"], order_projection="EXECUTABLE", record_count=50)
    assert build_params(None, bag) == {
        "marketIds": ["1.1"],
        "orderProjection": "EXECUTABLE",
        "recordCount": 50,
        "locale": "en",
    }


def test_place_params_never_carry_a_filter():
    bag = PlaceInstructionParams(
        market_id="1.234",
        customer_ref="ref-1",
        instructions=[
            PlaceInstruction(
                selection_id=47972,
                side="BACK",
                limit_order=LimitOrder(size=2.0, price=3.5),
            )
        ],
    )
    params = build_params(None, bag)
    assert "filter" not in params
    assert "customerStrategyRef" not in params
    assert params["marketId"] == "1.234"
    assert params["customerRef"] == "ref-1"
    assert params["instructions"] == [{
        "orderType": "LIMIT",
        "selectionId": 47972,
        "handicap": 0.0,
        "side": "BACK",
        "limitOrder": {"size": 2.0, "price": 3.5, "persistenceType": "LAPSE"},
    }]


def test_place_params_reject_a_filter():
    with pytest.raises(ValueError):
        build_params(MarketFilter(), PlaceInstructionParams(market_id="1.2"))


def test_unknown_bag_type_is_rejected():
    with pytest.raises(TypeError):
        build_params(MarketFilter(), {"maxResults": 1})


def test_build_does_not_mutate_inputs():
    market_filter = MarketFilter(event_ids=["1"])
    bag = MarketFilterParams(max_results=5)
    build_params(market_filter, bag)
    assert market_filter == MarketFilter(event_ids=["1"])
    assert bag == MarketFilterParams(max_results=5)
