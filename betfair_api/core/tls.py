"""
core/tls.py
------------

Builds the mutual-TLS context used for both the certificate login and
the JSON-RPC calls.  The server certificate is validated against the
configured trust root (or the ``certifi`` bundle when none is
configured) and the client certificate registered with the Betfair
account is presented on every handshake.

All file access happens here, up front, so that a missing or malformed
file is reported as ``SetupError`` before any connection is opened.
"""

from __future__ import annotations

import ssl

import certifi

from betfair_api.core.config import Settings
from betfair_api.core.errors import SetupError


def default_ca_bundle() -> str:
    """Path of the bundled certificate authority file."""
    return certifi.where()


def build_ssl_context(settings: Settings) -> ssl.SSLContext:
    """Create an SSL context with the trust root and client keypair loaded.

    :param settings: client settings carrying the certificate paths
    :raises SetupError: if the CA bundle or the keypair cannot be loaded
    :return: a client-side ``ssl.SSLContext``
    """
    cafile = settings.root_ca_path or default_ca_bundle()
    try:
        context = ssl.create_default_context(cafile=cafile)
    except (OSError, ssl.SSLError) as exc:
        raise SetupError(f"unable to load CA bundle {cafile}: {exc}") from exc

    if not settings.cert_path or not settings.key_path:
        raise SetupError("cert_path and key_path are required for certificate login")
    try:
        context.load_cert_chain(certfile=settings.cert_path, keyfile=settings.key_path)
    except (OSError, ssl.SSLError) as exc:
        raise SetupError(
            f"unable to load client keypair {settings.cert_path} / {settings.key_path}: {exc}"
        ) from exc
    return context
