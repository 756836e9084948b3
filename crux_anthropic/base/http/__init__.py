"""HTTP utilities package.

Exposes pooled ``httpx.AsyncClient`` instances.
"""

from .client import get_async_httpx_client, aclose_all_clients

__all__ = ["get_async_httpx_client", "aclose_all_clients"]
