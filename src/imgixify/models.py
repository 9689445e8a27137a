"""Enums shared by the builder and its callers.

:class:`TransformParam` is the closed set of imgix query parameters the
builder accepts.  The remaining enums name the values the chain methods
write into those parameters.
"""

from __future__ import annotations

from enum import Enum


class TransformParam(str, Enum):
    """imgix query parameter keys accepted by ``set_parameter``."""

    # Size
    WIDTH = "w"
    HEIGHT = "h"
    FIT = "fit"
    MAX_WIDTH = "max-w"
    MAX_HEIGHT = "max-h"
    MIN_WIDTH = "min-w"
    MIN_HEIGHT = "min-h"
    DPR = "dpr"
    RECT = "rect"

    # Crop / focal point
    CROP = "crop"
    FOCAL_X = "fp-x"
    FOCAL_Y = "fp-y"
    FOCAL_Z = "fp-z"

    # Automatic
    AUTO = "auto"

    # Fill / background / padding
    BACKGROUND = "bg"
    FILL = "fill"
    FILL_COLOR = "fill-color"
    PAD = "pad"

    # Format
    FORMAT = "fm"
    QUALITY = "q"
    LOSSLESS = "lossless"
    CHROMA_SUBSAMPLING = "chromasub"
    COLOR_SPACE = "cs"

    # Adjustment
    BRIGHTNESS = "bri"
    CONTRAST = "con"
    EXPOSURE = "exp"
    GAMMA = "gam"
    HIGHLIGHT = "high"
    HUE = "hue"
    SATURATION = "sat"
    SHADOW = "shad"
    SHARPEN = "sharp"
    VIBRANCE = "vib"

    # Stylize
    BLUR = "blur"
    PIXELLATE = "px"
    MONOCHROME = "monochrome"
    SEPIA = "sepia"
    INVERT = "invert"

    # Rotation
    FLIP = "flip"
    ORIENT = "orient"
    ROTATE = "rot"

    @classmethod
    def coerce(cls, key: str) -> TransformParam | None:
        """Return the member whose value is *key*, or ``None``."""
        try:
            return cls(key)
        except ValueError:
            return None


class FitMode(str, Enum):
    """Values written to the ``fit`` parameter."""

    CLIP = "clip"
    """Scale to fit inside the box, keeping the aspect ratio."""

    MAX = "max"
    """Like ``clip`` but never up-samples."""

    CROP = "crop"
    """Scale and crop to fill the box exactly."""

    FILL = "fill"
    """Fit inside the box and pad the leftover space with ``bg``."""


class AutoMode(str, Enum):
    """Entries appended to the ``auto`` parameter."""

    COMPRESS = "compress"
    ENHANCE = "enhance"
    FORMAT = "format"
    REDEYE = "redeye"


class CropMode(str, Enum):
    """Entries appended to the ``crop`` parameter."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    FACES = "faces"
    ENTROPY = "entropy"
    EDGES = "edges"


class Orientation(int, Enum):
    """Orientation derived from the effective width and height."""

    SQUARE = 0
    PORTRAIT = 1
    LANDSCAPE = 2
