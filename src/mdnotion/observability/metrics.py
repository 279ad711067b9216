"""Metrics hook protocol and no-op default implementation.

mdnotion emits counters and timings while converting documents and talking
to the Notion API.  By default a :class:`NoopMetricsHook` discards them; pass
any object satisfying :class:`MetricsHook` as ``MdNotionConfig.metrics`` to
route them to StatsD, Prometheus, Datadog or similar.

Emitted metric names:

* ``mdnotion.blocks_converted_total``   -- counter, tagged by block type
* ``mdnotion.conversion_duration_ms``   -- timing
* ``mdnotion.requests_total``           -- counter, tagged by method/status
* ``mdnotion.request_duration_ms``      -- timing
* ``mdnotion.pages_created_total``      -- counter
* ``mdnotion.upload_failure_total``     -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* is an optional ``str -> str`` mapping that implementations may
    translate into labels, tags or name suffixes.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...


class NoopMetricsHook:
    """Metrics backend that silently discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
