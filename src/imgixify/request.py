"""Request context: decides whether rendered URLs use ``https``.

The builder asks its context once per :meth:`build_url` call unless
``ImgixConfig.use_https`` forces a scheme.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class RequestContext(Protocol):
    """Anything that knows whether the current request is secure."""

    def is_secure_request(self) -> bool:
        ...


class StaticRequestContext:
    """A context with a fixed answer, for scripts and tests."""

    __slots__ = ("secure",)

    def __init__(self, secure: bool = False) -> None:
        self.secure = secure

    def is_secure_request(self) -> bool:
        return self.secure

    def __repr__(self) -> str:
        return f"StaticRequestContext(secure={self.secure!r})"


class HttpxRequestContext:
    """Derive the scheme from an incoming :class:`httpx.Request`.

    Parameters
    ----------
    request:
        The request being served.
    trust_forwarded_proto:
        Honour the ``X-Forwarded-Proto`` header set by a TLS-terminating
        proxy.  Disable when the application is reachable directly.
    """

    def __init__(self, request: httpx.Request, trust_forwarded_proto: bool = True) -> None:
        self.request = request
        self.trust_forwarded_proto = trust_forwarded_proto

    def is_secure_request(self) -> bool:
        if self.request.url.scheme == "https":
            return True
        if self.trust_forwarded_proto:
            # Proxies may send a comma-separated chain; the first hop is the client's.
            forwarded = self.request.headers.get("x-forwarded-proto", "")
            return forwarded.split(",")[0].strip().lower() == "https"
        return False
