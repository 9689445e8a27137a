"""Configuration for imgixify.

:class:`ImgixConfig` captures every setting the builder reads while
rendering. One instance is usually shared by every builder in a process;
nothing in the package mutates it.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

DEFAULT_FOLDER_PATH = "assets/Uploads/"
"""Storage prefix stripped from asset paths before they reach the CDN."""

DEFAULT_DOMAIN_SUFFIX = "imgix.net"

DEFAULT_RESPONSIVE_SCRIPT = "imgixify/js/imgix.min.js"


@dataclass
class ImgixConfig:
    """Complete configuration for a :class:`~imgixify.builder.TransformBuilder`.

    Parameters
    ----------
    sub_domain:
        imgix source sub-domain (``<sub_domain>.imgix.net``).  **Required
        at render time**; an empty value makes
        :meth:`~imgixify.builder.TransformBuilder.build_url` raise
        :class:`~imgixify.errors.ImgixifyConfigurationError`.
    secure_url_token:
        Signing key of a secured imgix source.  When set, every URL carries
        an ``s`` signature parameter.  Never logged.
    folder_path:
        Prefix of the asset's relative path that the imgix source already
        maps to.  Stripped case-insensitively.
    domain_suffix:
        Host suffix appended to ``sub_domain``.
    use_https:
        Force the URL scheme.  ``None`` asks the request context.
    include_library_param:
        Let the imgix library append its ``ixlib`` parameter.
    responsive_script:
        Client-side script registered by
        :meth:`~imgixify.builder.TransformBuilder.responsive`.
    cms_thumbnail_width, cms_thumbnail_height:
        Box used by ``cms_thumbnail()`` (padded).
    strip_thumbnail_width, strip_thumbnail_height:
        Box used by ``strip_thumbnail()`` (filled).
    metrics:
        Optional :class:`~imgixify.observability.MetricsHook` backend.
    """

    # ── CDN ─────────────────────────────────────────────────────────────
    sub_domain: str = ""

    secure_url_token: str | None = None

    folder_path: str = DEFAULT_FOLDER_PATH

    domain_suffix: str = DEFAULT_DOMAIN_SUFFIX

    use_https: bool | None = None

    include_library_param: bool = True

    # ── Responsive ──────────────────────────────────────────────────────
    responsive_script: str = DEFAULT_RESPONSIVE_SCRIPT

    # ── Thumbnails ──────────────────────────────────────────────────────
    cms_thumbnail_width: int = 100

    cms_thumbnail_height: int = 100

    strip_thumbnail_width: int = 50

    strip_thumbnail_height: int = 50

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if "://" in self.domain_suffix:
            raise ValueError(
                f"domain_suffix must be a bare host suffix, got {self.domain_suffix!r}"
            )
        for name in (
            "cms_thumbnail_width",
            "cms_thumbnail_height",
            "strip_thumbnail_width",
            "strip_thumbnail_height",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @property
    def domain(self) -> str:
        """The imgix host for this configuration, or ``""`` without a sub-domain."""
        if not self.sub_domain:
            return ""
        return f"{self.sub_domain}.{self.domain_suffix}"

    def __repr__(self) -> str:
        """Mask the signing token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "secure_url_token" and val:
                masked = f"...{val[-4:]}" if len(val) >= 8 else "****"
                parts.append(f"secure_url_token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"ImgixConfig({', '.join(parts)})"
