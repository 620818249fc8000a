"""
Root application entry point for the Betfair HTTP front-end
===========================================================

This module exposes the FastAPI application instance defined in
``betfair_api/main.py`` so that deployment tools like Uvicorn can
import ``main:app`` directly from the repository root.

Usage
-----

Export the application key and certificate paths, then point Uvicorn
at this module:

.. code-block:: bash

    export BETFAIR_APP_KEY=... BETFAIR_USERNAME=... BETFAIR_PASSWORD=...
    export BETFAIR_CERT_PATH=client-2048.crt BETFAIR_KEY_PATH=client-2048.key
    uvicorn main:app --host 0.0.0.0 --port 8000

Startup fails when ``BETFAIR_APP_KEY`` is missing or the certificate
files cannot be loaded.
"""

from betfair_api.main import app  # noqa: F401 re-export for Uvicorn

__all__ = ["app"]
