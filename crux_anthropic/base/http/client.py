"""Shared async HTTP client pool.

Purpose:
    Provide a small cache of reusable ``httpx.AsyncClient`` instances so
    repeated completion calls share connections. Timeouts derive from
    :func:`get_timeout_config`.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``. Purposes allow distinct
      pools (e.g., "messages" vs "cli").
    - Async clients cannot be closed from an ``atexit`` hook; applications and
      tests call :func:`aclose_all_clients` from their event loop.

The decoder never calls into this module: it takes whatever client it is
handed. The pool only backs the convenience facade and the CLI.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.AsyncClient] = {}
_LOCK = threading.RLock()


def get_async_httpx_client(base_url: Optional[str], purpose: str) -> httpx.AsyncClient:
    """Return a pooled ``httpx.AsyncClient`` for the given base URL and purpose.

    Parameters:
        base_url: Optional base URL set on the client. ``None`` groups clients
            under a shared key.
        purpose: Short string discriminating separate pools.

    Returns:
        A reusable ``httpx.AsyncClient``. Closed clients are replaced.
    """
    key = (base_url, purpose)
    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_timeout_config().to_httpx()
        if base_url:
            client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
        else:
            client = httpx.AsyncClient(timeout=timeout)
        _CLIENTS[key] = client
        return client


async def aclose_all_clients() -> None:
    """Close and clear all pooled clients."""
    with _LOCK:
        clients = list(_CLIENTS.values())
        _CLIENTS.clear()
    for c in clients:
        await c.aclose()


__all__ = ["get_async_httpx_client", "aclose_all_clients"]
