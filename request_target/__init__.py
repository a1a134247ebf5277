"""Request-Target: classify the request-target of an HTTP request line."""

from request_target.target import (
    ParseError,
    ParseErrorKind,
    RequestTarget,
    classify_target,
)

__version__ = "1.0.0"

__all__ = [
    "ParseError",
    "ParseErrorKind",
    "RequestTarget",
    "classify_target",
    "__version__",
]
