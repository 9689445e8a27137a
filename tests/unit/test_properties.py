"""Property-based tests for the transform builder using Hypothesis.

These complement the example-based tests by checking the chain and render
invariants over a wide range of sizes and call sequences.
"""

from __future__ import annotations

import httpx
from hypothesis import given, settings
from hypothesis import strategies as st

from imgixify.builder import TransformBuilder
from imgixify.config import ImgixConfig
from imgixify.markup import derive_title
from imgixify.models import AutoMode, CropMode, Orientation

# ---------------------------------------------------------------------------
# Strategies and helpers
# ---------------------------------------------------------------------------

_dim_st = st.integers(min_value=1, max_value=8192)

_CONFIG = ImgixConfig(sub_domain="demo", use_https=True, include_library_param=False)

# Chain method names match the values they append.
_AUTO_METHODS = sorted(mode.value for mode in AutoMode)
_CROP_METHODS = sorted(mode.value for mode in CropMode)


class _SizedAsset:
    filename = "assets/Uploads/photo.jpg"
    title = None
    relative_path = filename

    def __init__(self, width: int, height: int) -> None:
        self.size = (width, height)

    @property
    def full_path(self):
        return self.filename

    def exists(self) -> bool:
        return True

    def full_image_size(self) -> tuple[int, int]:
        return self.size


def _builder(width: int = 800, height: int = 600) -> TransformBuilder:
    return TransformBuilder(_SizedAsset(width, height), _CONFIG)


def _params(url: str) -> dict[str, str]:
    return dict(httpx.URL(url).params)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@given(w=_dim_st, h=_dim_st)
def test_fit_renders_clip_and_size(w, h):
    assert _params(_builder().fit(w, h).build_url()) == {
        "w": str(w),
        "h": str(h),
        "fit": "clip",
    }


@given(w=_dim_st, h=_dim_st, ow=_dim_st, oh=_dim_st)
def test_fill_max_bounds_by_original(w, h, ow, oh):
    assert _params(_builder(ow, oh).fill_max(w, h).build_url()) == {
        "w": str(w),
        "h": str(h),
        "fit": "crop",
        "max-w": str(ow),
        "max-h": str(oh),
    }


@given(methods=st.lists(st.sampled_from(_AUTO_METHODS), min_size=1, max_size=6))
def test_auto_list_preserves_call_order(methods):
    builder = _builder()
    for name in methods:
        getattr(builder, name)()
    assert builder.get_parameter("auto") == ",".join(methods)
    assert _params(builder.build_url())["auto"] == ",".join(methods)


@given(methods=st.lists(st.sampled_from(_CROP_METHODS), min_size=1, max_size=6))
def test_crop_list_preserves_call_order(methods):
    builder = _builder()
    for name in methods:
        getattr(builder, name)()
    assert builder.get_parameter("crop") == ",".join(methods)


@given(values=st.lists(_dim_st, min_size=1, max_size=5))
def test_last_non_appending_set_wins(values):
    builder = _builder()
    for value in values:
        builder.set_parameter("w", value)
    assert builder.parameters == {"w": str(values[-1])}


@given(w=_dim_st, h=_dim_st)
def test_render_always_resets(w, h):
    builder = _builder()
    builder.fill(w, h).compress().faces().responsive().render_tag()
    assert builder.parameters == {}
    assert builder.is_responsive is False
    assert _params(builder.build_url()) == {}


@given(ow=_dim_st, oh=_dim_st, limit=_dim_st)
def test_crop_width_only_when_wider(ow, oh, limit):
    builder = _builder(ow, oh).crop_width(limit)
    if ow > limit:
        assert builder.parameters == {"w": str(limit), "h": str(oh), "fit": "crop"}
    else:
        assert builder.parameters == {}


@given(ow=_dim_st, oh=_dim_st, limit=_dim_st)
def test_crop_height_only_when_taller(ow, oh, limit):
    builder = _builder(ow, oh).crop_height(limit)
    if oh > limit:
        assert builder.parameters == {"w": str(ow), "h": str(limit), "fit": "crop"}
    else:
        assert builder.parameters == {}


@given(w=_dim_st, h=_dim_st)
def test_orientation_matches_comparison(w, h):
    orientation = _builder(w, h).orientation
    if w > h:
        assert orientation is Orientation.LANDSCAPE
    elif h > w:
        assert orientation is Orientation.PORTRAIT
    else:
        assert orientation is Orientation.SQUARE


@settings(max_examples=50)
@given(title=st.text(min_size=1, max_size=50))
def test_title_never_contains_raw_markup(title):
    escaped = derive_title(title, "x.jpg")
    assert "<" not in escaped
    assert '"' not in escaped
