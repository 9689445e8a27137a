"""imgixify: fluent imgix URLs and ``<img>`` tags for stored images.

Public re-exports
-----------------

* **Builder:** :class:`TransformBuilder`
* **Configuration:** :class:`ImgixConfig`
* **Assets & context:** :class:`Asset`, :class:`FileAsset`,
  :class:`RequestContext`, :class:`StaticRequestContext`,
  :class:`HttpxRequestContext`, :class:`ScriptRequirements`
* **Errors:** :class:`ImgixifyError` and its subclasses, :class:`ErrorCode`
* **Models:** :class:`TransformParam`, :class:`FitMode`, :class:`AutoMode`,
  :class:`CropMode`, :class:`Orientation`

Usage::

    from imgixify import FileAsset, ImgixConfig, TransformBuilder

    config = ImgixConfig(sub_domain="my-source")
    image = TransformBuilder(FileAsset("assets/Uploads/cat.jpg"), config)
    tag = image.fill(400, 300).faces().compress().render_tag()
"""

from __future__ import annotations

# ── Assets & context ────────────────────────────────────────────────────
from imgixify.asset import Asset, FileAsset

# ── Builder ─────────────────────────────────────────────────────────────
from imgixify.builder import ParameterExtension, TransformBuilder

# ── Configuration ───────────────────────────────────────────────────────
from imgixify.config import DEFAULT_FOLDER_PATH, ImgixConfig

# ── Errors ──────────────────────────────────────────────────────────────
from imgixify.errors import (
    ErrorCode,
    ImgixifyConfigurationError,
    ImgixifyError,
    ImgixifyParameterError,
)

# ── Models ──────────────────────────────────────────────────────────────
from imgixify.models import AutoMode, CropMode, FitMode, Orientation, TransformParam
from imgixify.request import HttpxRequestContext, RequestContext, StaticRequestContext
from imgixify.requirements import ScriptRequirements

__all__ = [
    # Builder
    "TransformBuilder",
    "ParameterExtension",
    # Configuration
    "ImgixConfig",
    "DEFAULT_FOLDER_PATH",
    # Assets & context
    "Asset",
    "FileAsset",
    "RequestContext",
    "StaticRequestContext",
    "HttpxRequestContext",
    "ScriptRequirements",
    # Errors
    "ImgixifyError",
    "ErrorCode",
    "ImgixifyConfigurationError",
    "ImgixifyParameterError",
    # Models
    "TransformParam",
    "FitMode",
    "AutoMode",
    "CropMode",
    "Orientation",
]
