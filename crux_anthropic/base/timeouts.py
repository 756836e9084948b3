"""Timeout configuration and the low-speed transfer watchdog.

TimeoutConfig
    Normalized HTTP timeout values used when the pooled client is created.
    Environment overrides (all optional, positive floats):
        PT_TIMEOUT_CONNECT_SECONDS
        PT_TIMEOUT_HTTP_SECONDS
    The read timeout is left unset on streaming clients; stalled streams are
    policed by :class:`LowSpeedWatchdog` instead.

LowSpeedWatchdog
    Throughput floor for a single transfer. The transfer is aborted when the
    number of bytes received during a window of ``duration`` seconds stays
    below ``limit_bytes_per_second * duration``. It is a liveness guard, not a
    total deadline: a slow but steady stream is never cut off.
"""
from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from .constants import LOW_SPEED_LIMIT_BYTES_PER_SECOND


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Time allowed to establish a connection.
        http_timeout_seconds: Baseline timeout for write and pool acquisition.
    """

    connect_timeout_seconds: float = 10.0
    http_timeout_seconds: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        """Return an ``httpx.Timeout`` without a read deadline."""
        return httpx.Timeout(
            connect=self.connect_timeout_seconds,
            read=None,
            write=self.http_timeout_seconds,
            pool=self.http_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read a positive float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`.

    The cache is refreshed when the relevant environment variables change so
    tests can adjust values with ``monkeypatch.setenv``.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    guard = "/".join(
        [os.getenv("PT_TIMEOUT_CONNECT_SECONDS", ""), os.getenv("PT_TIMEOUT_HTTP_SECONDS", "")]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", 10.0),
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", 30.0),
    )
    _ENV_GUARD = guard
    return _CACHED


class LowSpeedTimeout(TimeoutError):
    """Raised by :class:`LowSpeedWatchdog` when throughput stays below the floor."""


class LowSpeedWatchdog:
    """Police a transfer's throughput over consecutive windows.

    Callers report the cumulative byte count via :meth:`observe` after every
    read and bound each wait with :meth:`remaining`. When a window ends with
    fewer than ``limit * duration`` bytes received, :meth:`observe` raises
    :class:`LowSpeedTimeout`.
    """

    def __init__(
        self,
        duration: float,
        limit_bytes_per_second: int = LOW_SPEED_LIMIT_BYTES_PER_SECOND,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if duration <= 0:
            raise ValueError("low-speed timeout duration must be positive")
        self.duration = duration
        self.limit = limit_bytes_per_second
        self._clock = clock
        self._window_start = clock()
        self._window_bytes_at_start = 0

    @property
    def threshold(self) -> float:
        """Bytes required per window to stay alive."""
        return self.limit * self.duration

    def remaining(self) -> float:
        """Seconds left in the current window (never negative)."""
        return max(0.0, self.duration - (self._clock() - self._window_start))

    def observe(self, total_bytes: int) -> None:
        """Account for ``total_bytes`` received so far and enforce the floor."""
        now = self._clock()
        if now - self._window_start < self.duration:
            return
        received = total_bytes - self._window_bytes_at_start
        if received < self.threshold:
            raise LowSpeedTimeout(
                f"transfer below {self.limit} B/s for {self.duration}s ({received} bytes received)"
            )
        self._window_start = now
        self._window_bytes_at_start = total_bytes


def make_watchdog(low_speed_timeout: Optional[float]) -> Optional[LowSpeedWatchdog]:
    """Return a watchdog for ``low_speed_timeout`` seconds, or ``None`` when unset."""
    if low_speed_timeout is None:
        return None
    return LowSpeedWatchdog(low_speed_timeout)


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "LowSpeedTimeout",
    "LowSpeedWatchdog",
    "make_watchdog",
]
