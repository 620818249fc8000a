"""
core/config.py
----------------

Client configuration module.

Defines strongly-typed settings loaded from the environment using
``pydantic-settings``.  One immutable ``Settings`` instance carries the
account credentials, the paths to the client certificate material and
the transport tuning (timeouts, retries, backoff).  Every variable is
prefixed with ``BETFAIR_``; for example ``BETFAIR_APP_KEY`` supplies the
application key and ``BETFAIR_HTTP_TIMEOUT=15`` overrides the
per-attempt timeout.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

IDENTITY_URL = "https://identitysso-cert.betfair.com/api/certlogin"
JSONRPC_URL = "https://api.betfair.com/exchange/betting/json-rpc/v1"


class Settings(BaseSettings):
    """Betfair client settings.

    The application key is mandatory.  When ``root_ca_path`` is left
    empty the bundled ``certifi`` authority file is used as the trust
    root.  Instances are frozen; build a new one to change anything.
    """

    # Account and key material
    app_key: str = Field(..., description="Betfair application key sent as X-Application.")
    username: str = Field("", description="Betfair account username.")
    password: str = Field("", description="Betfair account password.")
    cert_path: str = Field("", description="Path to the client certificate registered with the account.")
    key_path: str = Field("", description="Path to the private key of the client certificate.")
    root_ca_path: Optional[str] = Field(None, description="Trust root bundle; defaults to the certifi bundle.")

    # Endpoints
    identity_url: str = Field(IDENTITY_URL, description="Certificate login endpoint.")
    jsonrpc_url: str = Field(JSONRPC_URL, description="Betting API JSON-RPC endpoint.")

    # HTTP client settings
    http_timeout: float = Field(10.0, gt=0, description="Per-attempt timeout for HTTP requests in seconds.")
    http_max_retries: Optional[int] = Field(
        None, ge=0, description="Cap on retries after connection errors; unset means bounded by the deadline only."
    )
    http_backoff_factor: float = Field(0.5, ge=0, description="Backoff factor for exponential retry delays.")
    http_backoff_max: float = Field(30.0, ge=0, description="Upper bound for a single retry delay in seconds.")
    request_timeout: float = Field(20.0, gt=0, description="Deadline for one call, retries included, in seconds.")

    # Facade behaviour
    strict_decode: bool = Field(False, description="Raise DecodeError instead of returning empty results.")

    model_config = SettingsConfigDict(env_prefix="BETFAIR_", env_file=None, case_sensitive=False, frozen=True)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the settings.

    Raises ``pydantic.ValidationError`` when ``BETFAIR_APP_KEY`` is not set.
    """
    return Settings()
