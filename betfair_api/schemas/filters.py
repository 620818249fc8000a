"""
schemas/filters.py
-------------------

Market selection criteria.  A ``MarketFilter`` is sparse: every field
is optional and only the ones that were set travel on the wire.  The
exchange treats an absent field differently from an empty one, so the
wire form drops empty strings, empty lists and ``False`` flags instead
of sending them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from betfair_api.schemas.common import WireModel, drop_empty


class TimeRange(WireModel):
    from_: str = Field(default="", alias="from")
    to: str = ""

    def is_empty(self) -> bool:
        return not self.from_ and not self.to

    def to_wire(self) -> Dict[str, Any]:
        return drop_empty(self.model_dump(by_alias=True, mode="json"))


class MarketFilter(WireModel):
    text_query: str = ""
    event_type_ids: List[str] = Field(default_factory=list)
    event_ids: List[str] = Field(default_factory=list)
    competition_ids: List[str] = Field(default_factory=list)
    market_ids: List[str] = Field(default_factory=list)
    venues: List[str] = Field(default_factory=list)
    bsp_only: bool = False
    turn_in_play_enabled: bool = False
    in_play_only: bool = False
    market_betting_types: List[str] = Field(default_factory=list)
    market_type_codes: List[str] = Field(default_factory=list)
    market_start_time: Optional[TimeRange] = None
    market_countries: List[str] = Field(default_factory=list)
    with_orders: List[str] = Field(default_factory=list)
    race_types: List[str] = Field(default_factory=list)

    def to_wire(self) -> Dict[str, Any]:
        return drop_empty(self.model_dump(by_alias=True, mode="json"))
