"""
schemas/common.py
------------------

Base model shared by every wire shape.  Attributes use snake_case in
Python and camelCase on the wire; unknown fields returned by the
exchange are ignored so that new API fields do not break decoding.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def drop_empty(value: Any) -> Any:
    """Recursively remove ``None``, ``""``, ``False`` and empty containers.

    Numeric zeros are kept: ``0`` is a meaningful handicap or price.
    """
    if isinstance(value, dict):
        cleaned = {k: drop_empty(v) for k, v in value.items()}
        return {k: v for k, v in cleaned.items() if v not in (None, "", False, [], {})}
    if isinstance(value, list):
        return [drop_empty(v) for v in value]
    return value


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict keyed by wire names, unset optionals left out."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
