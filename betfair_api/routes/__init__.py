"""
Route aggregation package for the Betfair HTTP front-end.

Each module defines an ``APIRouter`` grouping related endpoints:
``auth`` for the certificate login and ``betting`` for the betting
operations.  The application factory imports these routers and
includes them in the FastAPI instance.
"""

__all__ = [
    "auth",
    "betting",
]

from . import auth, betting  # noqa: E402,F401
