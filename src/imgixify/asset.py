"""Image assets consumed by the builder.

The builder only needs a handful of read-only facts about an image: whether
it exists, where it lives, and how big it is.  :class:`Asset` describes that
surface; :class:`FileAsset` implements it for files on the local
filesystem, probing pixel sizes with Pillow.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable

from PIL import Image, UnidentifiedImageError

from imgixify.observability import get_logger

log = get_logger("imgixify.asset")


@runtime_checkable
class Asset(Protocol):
    """Read-only view of a stored image."""

    @property
    def filename(self) -> str:
        """Storage-relative file name, e.g. ``assets/Uploads/cat.jpg``."""
        ...

    @property
    def title(self) -> str | None:
        """Human title, if the asset has one."""
        ...

    @property
    def full_path(self) -> Path:
        ...

    @property
    def relative_path(self) -> str:
        """Storage-relative path, before the CDN folder prefix is stripped."""
        ...

    def exists(self) -> bool:
        ...

    def full_image_size(self) -> tuple[int, int] | None:
        """Return ``(width, height)`` in pixels, or ``None`` when unavailable."""
        ...


class FileAsset:
    """An image stored under *base_dir*.

    Parameters
    ----------
    filename:
        Path of the image relative to *base_dir*, using ``/`` separators.
        This is also the path handed to the CDN (after prefix stripping).
    base_dir:
        Directory that *filename* is relative to, typically the web root.
    title:
        Optional title used as the ``alt`` text of rendered tags.
    """

    def __init__(
        self,
        filename: str,
        base_dir: str | Path = ".",
        title: str | None = None,
    ) -> None:
        self._filename = filename
        self._base_dir = Path(base_dir)
        self._title = title

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def full_path(self) -> Path:
        return self._base_dir / self._filename

    @property
    def relative_path(self) -> str:
        return str(PurePosixPath(self._filename.replace("\\", "/")))

    def exists(self) -> bool:
        return bool(self._filename) and self.full_path.is_file()

    def full_image_size(self) -> tuple[int, int] | None:
        """Probe the pixel size of the file.

        Only the image header is read.  Returns ``None`` when the file is
        missing, Pillow cannot identify it, or the header declares more
        pixels than Pillow's decompression-bomb limit allows.
        """
        if not self.exists():
            return None
        try:
            with Image.open(self.full_path) as image:
                return image.size
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            log.warning(
                "image size probe failed",
                extra={"extra_fields": {
                    "path": str(self.full_path),
                    "error": type(exc).__name__,
                }},
            )
            return None

    def __repr__(self) -> str:
        return f"FileAsset(filename={self._filename!r}, base_dir={str(self._base_dir)!r})"
