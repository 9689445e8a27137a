"""Signature redaction for safe logging.

Signed imgix URLs carry an ``s`` query parameter derived from the source's
signing token.  :class:`~imgixify.observability.StructuredFormatter` passes
``url`` log fields through :func:`redact_url` before writing them.
"""

from __future__ import annotations

import httpx

SIGNATURE_PARAM = "s"

_PLACEHOLDER = "<redacted>"


def redact_url(url: str) -> str:
    """Return *url* with its signature parameter replaced.

    URLs without a signature, and strings httpx cannot parse, are returned
    unchanged.

    >>> redact_url("https://demo.imgix.net/a.jpg?w=10&s=abcdef")  # doctest: +SKIP
    'https://demo.imgix.net/a.jpg?w=10&s=%3Credacted%3E'
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return url
    if SIGNATURE_PARAM not in parsed.params:
        return url
    return str(parsed.copy_set_param(SIGNATURE_PARAM, _PLACEHOLDER))
