"""``<img>`` markup for rendered URLs."""

from __future__ import annotations

import html
import re

# Basename followed by a 1-6 character extension at the end of the path.
_FILENAME_RE = re.compile(r"([^/]*)\.[a-zA-Z0-9]{1,6}$")


def escape_attribute(value: str) -> str:
    """Escape *value* for use inside a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


def derive_title(title: str | None, filename: str) -> str:
    """Return the escaped ``alt`` text for an asset.

    An explicit *title* wins.  Otherwise the basename of *filename* is used
    with its extension removed; a filename without a recognisable extension
    is used as-is.
    """
    if title:
        return escape_attribute(title)
    match = _FILENAME_RE.search(filename or "")
    if match:
        return escape_attribute(match.group(1))
    return escape_attribute(filename or "")


def build_img_tag(url: str, alt: str, responsive: bool = False) -> str:
    """Assemble an ``<img>`` element.

    *alt* must already be escaped (see :func:`derive_title`); *url* is
    escaped here.  Responsive tags put the URL in ``ix-src`` so imgix.js can
    generate a ``srcset`` on the client.
    """
    attr = "ix-src" if responsive else "src"
    return f'<img {attr}="{escape_attribute(url)}" alt="{alt}" />'
