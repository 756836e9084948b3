"""AnthropicMessagesClient facade.

Resolves credentials and defaults through ``crux_anthropic.config``, builds
the :class:`Request`, and delegates to :func:`stream_completion`. The HTTP
client may be injected; otherwise a pooled ``httpx.AsyncClient`` is used.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union

import httpx

from ..base.constants import MISSING_API_KEY_ERROR
from ..base.errors import ErrorCode, ProviderError
from ..base.events import collect_text
from ..base.http import get_async_httpx_client
from ..base.logging import get_logger
from ..base.models import Model, ModelSetting
from ..config import get_provider_config
from ..config.defaults import CLIENT_DEFAULT_HTTP_PURPOSE
from .request_build import MessageLike, build_request
from .stream import EventStream, raise_on_error, stream_completion

PROVIDER = "anthropic"


class AnthropicMessagesClient:
    """Convenience wrapper around :func:`stream_completion`.

    Explicit constructor arguments win over configuration; see
    :func:`crux_anthropic.config.get_provider_config` for the merge order.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Union[Model, ModelSetting, None] = None,
        low_speed_timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        cfg = get_provider_config(
            PROVIDER,
            {
                **(overrides or {}),
                "api_key": api_key,
                "base_url": api_url,
                "model": model,
                "low_speed_timeout": low_speed_timeout,
            },
        )
        self._api_key: Optional[str] = cfg.get("api_key")
        self._api_url: str = cfg["base_url"]
        self._model = Model.from_setting(cfg["model"])
        self._max_tokens = int(cfg["max_tokens"])
        self._system = cfg.get("system_message") or ""
        lst = cfg.get("low_speed_timeout")
        self._low_speed_timeout = float(lst) if lst is not None else None
        self._http_client = http_client
        self._logger = get_logger("providers.anthropic.client")

    @property
    def provider_name(self) -> str:
        return PROVIDER

    @property
    def model(self) -> Model:
        return self._model

    @property
    def api_url(self) -> str:
        return self._api_url

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_async_httpx_client(None, purpose=CLIENT_DEFAULT_HTTP_PURPOSE)
        return self._http_client

    async def stream(
        self,
        messages: Iterable[MessageLike],
        *,
        system: Optional[str] = None,
        max_tokens: Optional[int] = None,
        model: Union[Model, ModelSetting, None] = None,
    ) -> EventStream:
        """Start a streaming completion and return its :class:`EventStream`.

        Raises:
            ProviderError: ``AUTH`` when no API key is configured, plus every
                whole-call error of :func:`stream_completion`.
        """
        if not self._api_key:
            raise ProviderError(code=ErrorCode.AUTH, message=MISSING_API_KEY_ERROR, provider=PROVIDER)
        request = build_request(
            model if model is not None else self._model,
            messages,
            system=self._system if system is None else system,
            max_tokens=max_tokens or self._max_tokens,
            stream=True,
        )
        return await stream_completion(
            self._client(),
            self._api_url,
            self._api_key,
            request,
            low_speed_timeout=self._low_speed_timeout,
        )

    async def complete_text(
        self,
        messages: Iterable[MessageLike],
        *,
        system: Optional[str] = None,
        max_tokens: Optional[int] = None,
        model: Union[Model, ModelSetting, None] = None,
    ) -> str:
        """Stream a completion and return the concatenated text.

        The first in-stream error is raised.
        """
        async with await self.stream(messages, system=system, max_tokens=max_tokens, model=model) as events:
            collected = [ev async for ev in raise_on_error(events)]
        return collect_text(collected)


__all__ = ["AnthropicMessagesClient", "PROVIDER"]
