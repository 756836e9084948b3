"""Streaming completion over the Messages API.

``stream_completion`` issues ``POST {api_url}/v1/messages`` through an
injected ``httpx.AsyncClient`` and, on a 2xx status, hands back an
:class:`EventStream`: a lazy, single-pass async iterator of
``ResponseEvent | StreamError`` items. Whole-call failures (serialization,
transport, HTTP status, anomalous body) are raised before any stream is
returned.

Concurrency:
    One request and one response body per call. Reads happen only when the
    caller pulls the next item; nothing runs in the background. The stream
    owns the response and closes it when exhausted, on ``aclose()``, or on
    leaving ``async with``. Abandoned streams are closed by the event loop's
    async-generator finalizer.

No retries are performed here and no total deadline is imposed; the only
timeout primitive is the optional low-speed watchdog.
"""

from __future__ import annotations

from typing import AsyncGenerator, AsyncIterator, Optional

import httpx

from ..base.errors import ProviderError
from ..base.events import ResponseEvent
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import Request
from ..base.timeouts import make_watchdog
from .stream_helpers import (
    StreamItem,
    build_http_request,
    iter_events,
    messages_url,
    raise_for_error_response,
    transport_error,
)

_LOGGER = get_logger("providers.anthropic.stream")


class EventStream:
    """Async iterator over decoded stream items that owns the HTTP response.

    Items are ``ResponseEvent`` values, or ``FrameDecodeError`` /
    ``TransportError`` instances delivered in place. Use as::

        async with await stream_completion(...) as events:
            async for item in events:
                ...
    """

    def __init__(self, response: httpx.Response, items: AsyncGenerator[StreamItem, None]) -> None:
        self._response = response
        self._items = items

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def request_id(self) -> Optional[str]:
        return self._response.headers.get("request-id")

    @property
    def closed(self) -> bool:
        return self._response.is_closed

    def __aiter__(self) -> "EventStream":
        return self

    async def __anext__(self) -> StreamItem:
        return await self._items.__anext__()

    async def aclose(self) -> None:
        """Stop decoding and release the connection. Idempotent."""
        try:
            await self._items.aclose()
        finally:
            await self._response.aclose()

    async def __aenter__(self) -> "EventStream":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


async def stream_completion(
    http_client: httpx.AsyncClient,
    api_url: str,
    api_key: str,
    request: Request,
    low_speed_timeout: Optional[float] = None,
) -> EventStream:
    """Send ``request`` and return a lazy stream of decoded events.

    Args:
        http_client: Client used for the exchange. Not closed by this call.
        api_url: API base URL, e.g. ``https://api.anthropic.com``.
        api_key: Value for the ``X-Api-Key`` header.
        request: The completion request.
        low_speed_timeout: Seconds the transfer may stay below the
            throughput floor before it is aborted. ``None`` disables it.

    Raises:
        SerializationError: The body could not be encoded (nothing sent).
        TransportError: Connect/send failed or the error body was unreadable.
        HttpStatusError: Non-2xx status; carries status code and raw body.
        AnomalousResponseError: Non-2xx status whose body is an event frame.
    """
    ctx = LogContext(model=request.model.id, endpoint=messages_url(api_url))
    http_request = build_http_request(http_client, api_url, api_key, request)
    normalized_log_event(
        _LOGGER,
        "stream.start",
        ctx,
        phase="start",
        emitted=None,
        max_tokens=request.max_tokens,
        messages=len(request.messages),
        stream=request.stream,
        low_speed_timeout=low_speed_timeout,
    )
    try:
        response = await http_client.send(http_request, stream=True)
    except httpx.RequestError as e:
        err = transport_error(e, model=ctx.model, phase="request failed")
        normalized_log_event(
            _LOGGER,
            "stream.transport_error",
            ctx,
            phase="start",
            error_code=err.code.value,
            emitted=False,
            error=err.message,
        )
        raise err from e

    # Throughput windows start once response headers have arrived.
    watchdog = make_watchdog(low_speed_timeout)
    ctx.request_id = response.headers.get("request-id")
    if not response.is_success:
        await raise_for_error_response(response, watchdog, logger=_LOGGER, ctx=ctx)
    return EventStream(response, iter_events(response, watchdog, logger=_LOGGER, ctx=ctx))


async def raise_on_error(items: AsyncIterator[StreamItem]) -> AsyncIterator[ResponseEvent]:
    """Pass events through and raise the first in-stream error."""
    async for item in items:
        if isinstance(item, ProviderError):
            raise item
        yield item


__all__ = ["EventStream", "stream_completion", "raise_on_error"]
