"""Fluent transform builder: accumulates imgix parameters and renders URLs.

A :class:`TransformBuilder` wraps one :class:`~imgixify.asset.Asset`.  Chain
methods write imgix query parameters into an internal map and return the
builder itself::

    builder = TransformBuilder(asset, config)
    url = builder.fill(400, 300).faces().compress().build_url()

Terminal methods (:meth:`TransformBuilder.build_url`,
:meth:`TransformBuilder.render_tag`) consume the accumulated parameters and
reset them, so the same builder can describe the next rendition of the
image without carrying anything over.  A builder belongs to one rendering
pass at a time; it holds no locks.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from enum import Enum

from imgix import UrlBuilder

from imgixify.asset import Asset
from imgixify.config import ImgixConfig
from imgixify.errors import ImgixifyConfigurationError, ImgixifyParameterError
from imgixify.markup import build_img_tag, derive_title
from imgixify.models import AutoMode, CropMode, FitMode, Orientation, TransformParam
from imgixify.observability import NoopMetricsHook, get_logger
from imgixify.observability.metrics import (
    MISSING_ASSET,
    TAGS_RENDERED,
    URL_BUILD_DURATION,
    URLS_BUILT,
)
from imgixify.request import RequestContext, StaticRequestContext
from imgixify.requirements import ScriptRequirements

log = get_logger("imgixify.builder")

ParameterValue = str | bool | int | float | Enum

ParameterExtension = Callable[[dict[str, str]], None]
"""Called with the parameter snapshot right before signing; mutates it in place."""


def _resolve_key(key: str | TransformParam) -> str:
    if isinstance(key, TransformParam):
        return key.value
    member = TransformParam.coerce(key)
    if member is None:
        raise ImgixifyParameterError(
            message=f"Unknown imgix parameter {key!r}",
            context={"key": key},
        )
    return member.value


def _format_value(value: ParameterValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _to_number(value: ParameterValue | None) -> int | float | None:
    """Parse a dimension stored as text; ``None`` when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    text = _format_value(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


class TransformBuilder:
    """Chainable imgix transform builder for a single asset.

    Parameters
    ----------
    asset:
        The image being rendered.
    config:
        Shared, read-only configuration.
    request_context:
        Decides ``http`` vs ``https`` when ``config.use_https`` is ``None``.
        Defaults to an insecure :class:`~imgixify.request.StaticRequestContext`.
    requirements:
        Collector that :meth:`responsive` registers imgix.js with.  Share
        one instance across a page so the script is emitted once.
    extensions:
        Parameter extensions run on every URL, see :meth:`add_extension`.
    """

    def __init__(
        self,
        asset: Asset,
        config: ImgixConfig,
        *,
        request_context: RequestContext | None = None,
        requirements: ScriptRequirements | None = None,
        extensions: Iterable[ParameterExtension] | None = None,
    ) -> None:
        self.asset = asset
        self.config = config
        self.request_context: RequestContext = request_context or StaticRequestContext()
        self.requirements = requirements if requirements is not None else ScriptRequirements()
        self._extensions: list[ParameterExtension] = list(extensions or [])
        self._metrics = config.metrics or NoopMetricsHook()
        self._parameters: dict[str, str] = {}
        self._responsive = False

    # ── State ───────────────────────────────────────────────────────────

    @property
    def parameters(self) -> dict[str, str]:
        """A copy of the parameters accumulated since the last render."""
        return dict(self._parameters)

    @property
    def is_responsive(self) -> bool:
        return self._responsive

    def set_parameter(
        self,
        key: str | TransformParam,
        value: ParameterValue,
        append: bool = False,
    ) -> TransformBuilder:
        """Set one imgix parameter.

        With ``append=True`` an existing value is treated as a comma
        separated list and *value* is pushed onto it; otherwise the value is
        replaced.  Booleans are stored as ``true`` / ``false``.

        Raises
        ------
        ImgixifyParameterError
            If *key* is not a known imgix parameter.
        """
        name = _resolve_key(key)
        text = _format_value(value)
        existing = self._parameters.get(name)
        if append and existing:
            entries = existing.split(",")
            entries.append(text)
            text = ",".join(entries)
        self._parameters[name] = text
        return self

    def get_parameter(self, key: str | TransformParam) -> str | None:
        return self._parameters.get(_resolve_key(key))

    def set_dimensions(
        self,
        width: ParameterValue | None = None,
        height: ParameterValue | None = None,
    ) -> TransformBuilder:
        """Set ``w`` and/or ``h``; ``None`` leaves a dimension untouched."""
        if width is not None:
            self.set_parameter(TransformParam.WIDTH, width)
        if height is not None:
            self.set_parameter(TransformParam.HEIGHT, height)
        return self

    def add_extension(self, extension: ParameterExtension) -> TransformBuilder:
        """Register a callable that may edit the parameters before signing.

        Extensions run in registration order, after the builder has reset
        its own state, and receive the snapshot dict to mutate in place.
        """
        self._extensions.append(extension)
        return self

    # ── Resizing ────────────────────────────────────────────────────────

    def fit(self, width: ParameterValue, height: ParameterValue) -> TransformBuilder:
        """Scale proportionally to fit within *width* x *height*."""
        self.set_dimensions(width, height)
        self.set_parameter(TransformParam.FIT, FitMode.CLIP)
        return self

    def fit_max(self, width: ParameterValue, height: ParameterValue) -> TransformBuilder:
        """Like :meth:`fit` but never up-samples."""
        self.set_dimensions(width, height)
        self.set_parameter(TransformParam.FIT, FitMode.MAX)
        return self

    def fill(self, width: ParameterValue, height: ParameterValue) -> TransformBuilder:
        """Resize and crop to fill *width* x *height* exactly."""
        self.set_dimensions(width, height)
        self.set_parameter(TransformParam.FIT, FitMode.CROP)
        return self

    def fill_max(self, width: ParameterValue, height: ParameterValue) -> TransformBuilder:
        """Crop to the aspect ratio of *width* x *height* without up-sampling.

        The original pixel size becomes ``max-w`` / ``max-h``.
        """
        self.fill(width, height)
        self._set_original_bound(TransformParam.MAX_WIDTH, self.original_width)
        self._set_original_bound(TransformParam.MAX_HEIGHT, self.original_height)
        return self

    def pad(
        self,
        width: ParameterValue,
        height: ParameterValue,
        background_color: str = "FFFFFF",
    ) -> TransformBuilder:
        """Fit inside *width* x *height* and fill leftover space with a colour."""
        self.set_dimensions(width, height)
        self.set_parameter(TransformParam.FIT, FitMode.FILL)
        self.set_parameter(TransformParam.BACKGROUND, background_color)
        return self

    def scale_width(self, width: ParameterValue) -> TransformBuilder:
        self.set_dimensions(width=width)
        self.set_parameter(TransformParam.FIT, FitMode.CLIP)
        return self

    def scale_max_width(self, width: ParameterValue) -> TransformBuilder:
        """Scale by width, capped at the original width."""
        self.scale_width(width)
        self._set_original_bound(TransformParam.MAX_WIDTH, self.original_width)
        return self

    def scale_height(self, height: ParameterValue) -> TransformBuilder:
        self.set_dimensions(height=height)
        self.set_parameter(TransformParam.FIT, FitMode.CLIP)
        return self

    def scale_max_height(self, height: ParameterValue) -> TransformBuilder:
        """Scale by height, capped at the original height."""
        self.scale_height(height)
        self._set_original_bound(TransformParam.MAX_HEIGHT, self.original_height)
        return self

    def crop_width(self, width: int) -> TransformBuilder:
        """Crop horizontally when the original is wider than *width*; keep the height.

        Example: ``builder.scale_height(100).crop_width(100)``.
        """
        original = self.original_width
        if original is not None and original > width:
            self.fill(width, self.original_height)
        return self

    def crop_height(self, height: int) -> TransformBuilder:
        """Crop vertically when the original is taller than *height*; keep the width."""
        original = self.original_height
        if original is not None and original > height:
            self.fill(self.original_width, height)
        return self

    def cms_thumbnail(self) -> TransformBuilder:
        return self.pad(self.config.cms_thumbnail_width, self.config.cms_thumbnail_height)

    def strip_thumbnail(self) -> TransformBuilder:
        return self.fill(self.config.strip_thumbnail_width, self.config.strip_thumbnail_height)

    def _set_original_bound(self, key: TransformParam, value: int | None) -> None:
        if value is None:
            log.warning(
                "original size unavailable, bound skipped",
                extra={"extra_fields": {"param": key.value, "asset": self.asset.filename}},
            )
            return
        self.set_parameter(key, value)

    # ── Responsive ──────────────────────────────────────────────────────

    def responsive(self, flag: bool = True) -> TransformBuilder:
        """Render the next tag with ``ix-src`` so imgix.js builds a ``srcset``."""
        self.requirements.require(self.config.responsive_script)
        self._responsive = bool(flag)
        return self

    # ── auto= ───────────────────────────────────────────────────────────

    def compress(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.AUTO, AutoMode.COMPRESS, append=True)

    def enhance(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.AUTO, AutoMode.ENHANCE, append=True)

    def format(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.AUTO, AutoMode.FORMAT, append=True)

    def redeye(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.AUTO, AutoMode.REDEYE, append=True)

    # ── crop= ───────────────────────────────────────────────────────────

    def top(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.CROP, CropMode.TOP, append=True)

    def bottom(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.CROP, CropMode.BOTTOM, append=True)

    def left(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.CROP, CropMode.LEFT, append=True)

    def right(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.CROP, CropMode.RIGHT, append=True)

    def faces(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.CROP, CropMode.FACES, append=True)

    def entropy(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.CROP, CropMode.ENTROPY, append=True)

    def edges(self) -> TransformBuilder:
        return self.set_parameter(TransformParam.CROP, CropMode.EDGES, append=True)

    # ── Dimensions ──────────────────────────────────────────────────────

    def _original_size(self) -> tuple[int, int] | None:
        if not self.asset.exists():
            return None
        return self.asset.full_image_size()

    @property
    def original_width(self) -> int | None:
        size = self._original_size()
        return size[0] if size else None

    @property
    def original_height(self) -> int | None:
        size = self._original_size()
        return size[1] if size else None

    @property
    def width(self) -> int | float | None:
        """Requested width if ``w`` is set, else the original width."""
        explicit = _to_number(self._parameters.get(TransformParam.WIDTH.value))
        return explicit if explicit else self.original_width

    @property
    def height(self) -> int | float | None:
        """Requested height if ``h`` is set, else the original height."""
        explicit = _to_number(self._parameters.get(TransformParam.HEIGHT.value))
        return explicit if explicit else self.original_height

    @property
    def dimensions(self) -> str:
        """``"<width>x<height>"`` of the original, or a not-found message."""
        size = self._original_size()
        if size is None:
            return f"file '{self.asset.full_path}' not found"
        return f"{size[0]}x{size[1]}"

    def is_width(self, width: ParameterValue | None) -> bool:
        target = _to_number(width)
        if not target:
            return False
        return self.width is not None and self.width == target

    def is_height(self, height: ParameterValue | None) -> bool:
        target = _to_number(height)
        if not target:
            return False
        return self.height is not None and self.height == target

    def is_size(self, width: ParameterValue | None, height: ParameterValue | None) -> bool:
        return self.is_width(width) and self.is_height(height)

    @property
    def orientation(self) -> Orientation | None:
        """Orientation of the effective size; ``None`` when it is unknown."""
        width, height = self.width, self.height
        if width is None or height is None:
            return None
        if width > height:
            return Orientation.LANDSCAPE
        if height > width:
            return Orientation.PORTRAIT
        return Orientation.SQUARE

    # ── Rendering ───────────────────────────────────────────────────────

    def _cdn_path(self) -> str:
        """Asset path relative to the imgix source root."""
        path = self.asset.relative_path
        prefix = self.config.folder_path
        if prefix and path.lower().startswith(prefix.lower()):
            path = path[len(prefix):]
        return path

    def _url_builder(self) -> UrlBuilder:
        if not self.config.sub_domain:
            raise ImgixifyConfigurationError(
                message="Undefined sub_domain: set ImgixConfig.sub_domain to your imgix source",
                context={"setting": "sub_domain"},
            )
        domain = self.config.domain
        use_https = self.config.use_https
        if use_https is None:
            use_https = self.request_context.is_secure_request()
        try:
            return UrlBuilder(
                domain,
                use_https=use_https,
                sign_key=self.config.secure_url_token or None,
                include_library_param=self.config.include_library_param,
            )
        except ValueError as exc:
            raise ImgixifyConfigurationError(
                message=f"imgix rejected domain {domain!r}",
                context={"setting": "sub_domain", "domain": domain},
                cause=exc,
            ) from exc

    def build_url(self) -> str:
        """Render the accumulated parameters into an imgix URL.

        The builder's parameters are reset before extensions run and before
        the URL is signed, so the next render starts clean.

        Raises
        ------
        ImgixifyConfigurationError
            If ``sub_domain`` is empty or rejected by the imgix library.
        """
        start = time.monotonic()
        url_builder = self._url_builder()
        path = self._cdn_path()

        parameters = self._parameters
        self._parameters = {}
        for extension in self._extensions:
            extension(parameters)

        url = url_builder.create_url(path, dict(parameters))

        elapsed_ms = (time.monotonic() - start) * 1000
        self._metrics.increment(URLS_BUILT)
        self._metrics.timing(URL_BUILD_DURATION, elapsed_ms)
        log.debug(
            "url built",
            extra={"extra_fields": {
                "domain": self.config.domain,
                "path": path,
                "params": len(parameters),
                "url": url,
            }},
        )
        return url

    def render_tag(self) -> str | None:
        """Render an ``<img>`` tag, or ``None`` when the asset does not exist.

        Consumes the responsive flag before the parameters (through
        :meth:`build_url`), so a failed build never carries the flag into the
        next render.  A missing asset resets both without rendering.
        """
        if not self.asset.exists():
            self._parameters = {}
            self._responsive = False
            self._metrics.increment(MISSING_ASSET)
            log.debug(
                "asset missing, tag skipped",
                extra={"extra_fields": {"asset": self.asset.filename}},
            )
            return None

        responsive = self._responsive
        self._responsive = False
        url = self.build_url()
        alt = derive_title(self.asset.title, self.asset.filename)

        self._metrics.increment(
            TAGS_RENDERED, tags={"mode": "ix-src" if responsive else "src"}
        )
        return build_img_tag(url, alt, responsive=responsive)

    def for_template(self) -> str:
        """Template-facing rendering: the tag, or ``""`` for a missing asset."""
        return self.render_tag() or ""

    def __html__(self) -> str:
        return self.for_template()

    def __repr__(self) -> str:
        return (
            f"TransformBuilder(asset={self.asset!r}, parameters={self._parameters!r}, "
            f"responsive={self._responsive!r})"
        )
