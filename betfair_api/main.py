# main.py
from __future__ import annotations

import json
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

# Import logging utilities early so that the logger configuration is
# applied before any other modules emit log messages.
from betfair_api.logging_config import logger

from betfair_api.clients.jsonrpc_client import JsonRPCClient
from betfair_api.core.config import get_settings
from betfair_api.core.errors import (
    AuthError,
    BetfairError,
    DecodeError,
    InvokeError,
    RemoteAPIError,
    TransportError,
)
from betfair_api.routes.auth import router as auth_router
from betfair_api.routes.betting import router as betting_router
from betfair_api.services.betting_service import BettingAPI

ERROR_STATUS = {
    AuthError: 401,
    RemoteAPIError: 502,
    InvokeError: 502,
    DecodeError: 502,
    TransportError: 504,
}


def status_for(exc: BetfairError) -> int:
    for error_type, status in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    # one transport client per process; a missing app key or unreadable
    # certificate aborts startup here, before any network call
    settings = get_settings()
    client = JsonRPCClient(settings)
    app.state.rpc_client = client
    app.state.betting_api = BettingAPI(client, strict_decode=settings.strict_decode)
    logger.info(json.dumps({"event": "startup", "jsonrpc_url": settings.jsonrpc_url}))
    try:
        yield
    finally:
        client.close()


def create_app() -> FastAPI:
    app = FastAPI(default_response_class=ORJSONResponse, lifespan=lifespan)

    app.include_router(auth_router)
    app.include_router(betting_router)

    @app.exception_handler(BetfairError)
    async def betfair_error_handler(request: Request, exc: BetfairError):
        status = status_for(exc)
        logger.error(json.dumps({
            "event": "betfair_error",
            "path": request.url.path,
            "status": status,
            "error": exc.to_dict(),
        }))
        return ORJSONResponse(status_code=status, content={"detail": exc.to_dict()})

    @app.middleware("http")  # type: ignore[misc]
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000
        logger.info(json.dumps({
            "event": "http_request",
            "path": request.url.path,
            "method": request.method,
            "status": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }))
        return response

    return app


app = create_app()
