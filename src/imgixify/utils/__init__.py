from .redact import redact_url

__all__ = [
    "redact_url",
]
