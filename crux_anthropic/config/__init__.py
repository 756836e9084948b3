"""Unified configuration layer.

Merge order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``PROVIDERS_CONFIG_FILE``
    3. Environment variables
    4. In-code overrides passed to :func:`get_provider_config`

Environment Variable Conventions
--------------------------------
``<PROVIDER>_API_KEY``, ``<PROVIDER>_MODEL``, ``<PROVIDER>_BASE_URL``,
``<PROVIDER>_MAX_TOKENS``, ``<PROVIDER>_LOW_SPEED_TIMEOUT``,
``<PROVIDER>_SYSTEM_MESSAGE``. The API key also honours the aliases listed in
``config.env.ENV_ALIASES``.

External config file example::

    anthropic:
      model: claude-3-opus
      base_url: https://api.anthropic.com
      max_tokens: 2048
      low_speed_timeout: 30

A custom model may be given as ``{"custom": {"name": ..., "max_tokens": ...}}``.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    ANTHROPIC_DEFAULT_MODEL,
    ANTHROPIC_DEFAULT_SYSTEM_MESSAGE,
)
from .env import is_placeholder, resolve_provider_key

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "anthropic": {
        "model": ANTHROPIC_DEFAULT_MODEL,
        "base_url": ANTHROPIC_DEFAULT_BASE_URL,
        "max_tokens": ANTHROPIC_DEFAULT_MAX_TOKENS,
        "system_message": ANTHROPIC_DEFAULT_SYSTEM_MESSAGE,
        "low_speed_timeout": None,
    },
}

# field -> (env suffix, parser)
ENV_FIELD_MAP = {
    "model": ("MODEL", str),
    "base_url": ("BASE_URL", str),
    "max_tokens": ("MAX_TOKENS", int),
    "low_speed_timeout": ("LOW_SPEED_TIMEOUT", float),
    "system_message": ("SYSTEM_MESSAGE", str),
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    """Load (and cache per path) the file named by ``PROVIDERS_CONFIG_FILE``.

    JSON is tried first, then YAML. A missing or unparsable file yields ``{}``.
    """
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv("PROVIDERS_CONFIG_FILE") or None
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Any = {}
    if path and Path(path).is_file():
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except ValueError:
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError:
                data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    _FILE_CACHE_PATH = path
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, (suffix, parse) in ENV_FIELD_MAP.items():
        raw = os.getenv(f"{prefix}_{suffix}")
        if raw is None or raw.strip() == "":
            continue
        try:
            out[field] = parse(raw.strip())
        except ValueError:
            continue
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    Placeholder API keys are dropped from the result.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}
    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    if is_placeholder(cfg.get("api_key")):
        cfg.pop("api_key", None)
    return cfg


def get_model(provider: str) -> Optional[Any]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "DEFAULTS",
    "ENV_FIELD_MAP",
]
