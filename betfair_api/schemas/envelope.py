"""
schemas/envelope.py
--------------------

JSON-RPC 2.0 request and response envelopes.  The ``result`` member is
deliberately untyped: its shape depends on the operation and is decoded
by the facade, not here.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class JsonRPCError(BaseModel):
    code: int
    message: str = ""


class JsonRPCRequest(BaseModel):
    jsonrpc: str = "2.0"
    method: str
    params: Dict[str, Any] = Field(default_factory=dict)
    id: int = 1


class JsonRPCResponse(BaseModel):
    jsonrpc: Optional[str] = None
    result: Any = None
    error: Optional[JsonRPCError] = None
    id: Optional[int] = None
