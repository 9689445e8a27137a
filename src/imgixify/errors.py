"""Error hierarchy for imgixify.

Every public error class inherits from :class:`ImgixifyError`. Each carries
a machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Missing assets are *not* errors: dimension probes return ``None`` and
:meth:`~imgixify.builder.TransformBuilder.render_tag` returns ``None``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    PARAMETER_ERROR = "PARAMETER_ERROR"


class ImgixifyError(Exception):
    """Base exception for all imgixify errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


class ImgixifyConfigurationError(ImgixifyError):
    """The configuration cannot produce a CDN URL.

    Raised when ``sub_domain`` is empty, or when the imgix library rejects
    the composed domain. Treated as a programming error: nothing inside the
    package catches it.

    Context keys: ``setting``, ``domain``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONFIGURATION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class ImgixifyParameterError(ImgixifyError):
    """A transform parameter key is outside the accepted set.

    Context keys: ``key``, ``value``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PARAMETER_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
