"""Metrics hook protocol and no-op default implementation.

The builder reports what it renders through a :class:`MetricsHook`.  By
default :class:`NoopMetricsHook` discards everything; pass your own backend
as ``ImgixConfig(metrics=...)`` to forward data points to StatsD,
Prometheus or similar.

Emitted metric names:

* ``imgixify.urls_built_total``        -- counter
* ``imgixify.url_build_duration_ms``   -- timing
* ``imgixify.tags_rendered_total``     -- counter, tag ``mode`` (``src`` / ``ix-src``)
* ``imgixify.missing_asset_total``     -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

URLS_BUILT = "imgixify.urls_built_total"
URL_BUILD_DURATION = "imgixify.url_build_duration_ms"
TAGS_RENDERED = "imgixify.tags_rendered_total"
MISSING_ASSET = "imgixify.missing_asset_total"


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* is an optional ``dict[str, str]`` that implementations translate
    into whatever their backend uses for dimensions.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics backend that discards every data point."""

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

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
