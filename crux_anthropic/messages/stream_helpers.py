"""Streaming decode helpers.

Purpose:
- Build the outbound ``httpx.Request`` for ``POST /v1/messages``.
- Read a response body under the optional low-speed watchdog.
- Turn event-stream lines into typed events with per-frame error isolation.
- Resolve non-success responses into a single typed error.

Failure semantics:
- Serialization and URL problems raise before anything is sent.
- Inside a successful stream, a bad frame yields ``FrameDecodeError`` and
  decoding continues; a read failure or low-speed abort yields one
  ``TransportError`` and ends the sequence.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import aclosing
from typing import AsyncIterator, Optional, TypeVar, Union

import httpx
from pydantic import ValidationError

from ..base.constants import (
    API_VERSION,
    BETA_FEATURES,
    DATA_PREFIX,
    HEADER_API_KEY,
    HEADER_API_VERSION,
    HEADER_BETA,
    HEADER_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    MESSAGES_PATH,
)
from ..base.errors import (
    RETRYABLE_CODES,
    AnomalousResponseError,
    ErrorCode,
    FrameDecodeError,
    HttpStatusError,
    StreamError,
    TransportError,
    classify_exception,
    classify_status,
)
from ..base.events import MessageStop, ResponseEvent, decode_event, is_event_frame
from ..base.logging import LogContext, normalized_log_event
from ..base.models import Request
from ..base.timeouts import LowSpeedTimeout, LowSpeedWatchdog

T = TypeVar("T")

StreamItem = Union[ResponseEvent, StreamError]


def messages_url(api_url: str) -> str:
    return f"{api_url.rstrip('/')}{MESSAGES_PATH}"


def build_headers(api_key: str) -> dict:
    return {
        HEADER_API_VERSION: API_VERSION,
        HEADER_BETA: BETA_FEATURES,
        HEADER_API_KEY: api_key,
        HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE,
    }


def build_http_request(client: httpx.AsyncClient, api_url: str, api_key: str, request: Request) -> httpx.Request:
    """Serialize ``request`` and build the POST without sending it.

    Raises:
        SerializationError: If the body cannot be encoded.
        TransportError: If the URL is invalid.
    """
    body = request.to_wire()
    try:
        return client.build_request("POST", messages_url(api_url), headers=build_headers(api_key), content=body)
    except httpx.InvalidURL as e:
        raise TransportError(
            code=ErrorCode.VALIDATION,
            message=f"invalid API URL '{api_url}': {e}",
            model=request.model.id,
            raw=e,
        ) from e


def transport_error(exc: BaseException, *, model: Optional[str], phase: str) -> TransportError:
    """Wrap a transport-layer exception with its normalized code."""
    code = ErrorCode.TIMEOUT if isinstance(exc, LowSpeedTimeout) else classify_exception(exc)
    return TransportError(
        code=code,
        message=f"{phase}: {exc}",
        model=model,
        retryable=code in RETRYABLE_CODES,
        raw=exc,
    )


async def guarded_iter(
    source: AsyncIterator[T],
    response: httpx.Response,
    watchdog: Optional[LowSpeedWatchdog],
) -> AsyncIterator[T]:
    """Iterate ``source`` while enforcing the watchdog's throughput floor.

    Each pending read is waited on for at most the rest of the current
    window. A window that closes while the read is still pending is only
    fatal when too few bytes arrived; otherwise the same read keeps waiting,
    so partially received lines are never discarded.

    Raises:
        LowSpeedTimeout: When throughput stays below the floor for a window.
    """
    if watchdog is None:
        async for item in source:
            yield item
        return
    while True:
        pending = asyncio.ensure_future(source.__anext__())
        try:
            while True:
                done, _ = await asyncio.wait({pending}, timeout=watchdog.remaining())
                watchdog.observe(response.num_bytes_downloaded)
                if done:
                    break
        except BaseException:
            pending.cancel()
            await asyncio.wait({pending})
            raise
        try:
            item = pending.result()
        except StopAsyncIteration:
            return
        yield item


def decode_line(line: str, *, model: Optional[str]) -> Optional[StreamItem]:
    """Decode one body line.

    Returns ``None`` for lines without the ``data: `` prefix, the decoded
    event for a good frame, or a ``FrameDecodeError`` for a bad one.
    """
    if not line.startswith(DATA_PREFIX):
        return None
    frame = line[len(DATA_PREFIX):]
    try:
        return decode_event(frame)
    except ValidationError as e:
        first = e.errors()[0] if e.error_count() else {}
        return FrameDecodeError(
            message=f"failed to decode event frame: {first.get('msg', e)}",
            model=model,
            raw=e,
            line=frame,
        )


async def iter_events(
    response: httpx.Response,
    watchdog: Optional[LowSpeedWatchdog],
    *,
    logger: logging.Logger,
    ctx: LogContext,
) -> AsyncIterator[StreamItem]:
    """Lazily decode a successful response body into events.

    Ends after ``message_stop``, when the body is exhausted, or after yielding
    a ``TransportError``. The response is closed on every exit path.
    """
    emitted = 0
    errors = 0
    usage = None
    try:
        async with aclosing(guarded_iter(response.aiter_lines(), response, watchdog)) as lines:
            async for line in lines:
                item = decode_line(line, model=ctx.model)
                if item is None:
                    continue
                if isinstance(item, FrameDecodeError):
                    errors += 1
                    normalized_log_event(
                        logger,
                        "stream.decode_error",
                        ctx,
                        phase="mid_stream",
                        error_code=item.code.value,
                        emitted=emitted,
                        level=logging.WARNING,
                        error=item.message,
                        line=item.line,
                    )
                    yield item
                    continue
                emitted += 1
                usage = getattr(item, "usage", None) or usage
                yield item
                if isinstance(item, MessageStop):
                    break
    except (httpx.RequestError, LowSpeedTimeout) as e:
        errors += 1
        err = transport_error(e, model=ctx.model, phase="body read failed")
        normalized_log_event(
            logger,
            "stream.transport_error",
            ctx,
            phase="mid_stream",
            error_code=err.code.value,
            emitted=emitted,
            level=logging.WARNING,
            error=err.message,
        )
        yield err
    finally:
        await response.aclose()
        normalized_log_event(
            logger,
            "stream.end",
            ctx,
            phase="finalize",
            emitted=emitted,
            tokens=usage,
            errors=errors,
        )


async def read_error_body(response: httpx.Response, watchdog: Optional[LowSpeedWatchdog], *, model: Optional[str]) -> str:
    """Read a (small) error body fully and decode it as UTF-8.

    Undecodable bytes are replaced rather than failing the call.

    Raises:
        TransportError: If reading the body fails.
    """
    chunks = []
    try:
        async with aclosing(guarded_iter(response.aiter_bytes(), response, watchdog)) as body:
            async for chunk in body:
                chunks.append(chunk)
    except (httpx.RequestError, LowSpeedTimeout) as e:
        raise transport_error(e, model=model, phase="error body read failed") from e
    finally:
        await response.aclose()
    return b"".join(chunks).decode("utf-8", errors="replace")


async def raise_for_error_response(
    response: httpx.Response,
    watchdog: Optional[LowSpeedWatchdog],
    *,
    logger: logging.Logger,
    ctx: LogContext,
) -> None:
    """Resolve a non-success response into a typed error and raise it.

    Raises:
        AnomalousResponseError: The body decodes as an event frame.
        HttpStatusError: Otherwise, with status code and raw body.
        TransportError: The body could not be read.
    """
    status = response.status_code
    body = await read_error_body(response, watchdog, model=ctx.model)
    if is_event_frame(body):
        normalized_log_event(
            logger,
            "stream.anomalous_response",
            ctx,
            phase="start",
            error_code=ErrorCode.PROTOCOL.value,
            emitted=False,
            level=logging.ERROR,
            status_code=status,
        )
        raise AnomalousResponseError(status_code=status, body=body, model=ctx.model)
    code = classify_status(status)
    normalized_log_event(
        logger,
        "stream.http_error",
        ctx,
        phase="start",
        error_code=code.value,
        emitted=False,
        level=logging.WARNING,
        status_code=status,
    )
    raise HttpStatusError(
        code=code,
        message=f"{status} {body}",
        model=ctx.model,
        retryable=code in RETRYABLE_CODES,
        status_code=status,
        body=body,
    )


__all__ = [
    "StreamItem",
    "messages_url",
    "build_headers",
    "build_http_request",
    "transport_error",
    "guarded_iter",
    "decode_line",
    "iter_events",
    "read_error_body",
    "raise_for_error_response",
]
