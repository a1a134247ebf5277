"""Request-target classification engine.

Classifies the request-target token of an HTTP request line into one of
the four forms defined by RFC 7230 section 5.3, so the caller can decide
how to interpret the rest of the request.
"""

from __future__ import annotations

import enum


class RequestTarget(enum.Enum):
    """A request target that appears in every HTTP request line.

    The form is a hint for how the target should be interpreted; it does
    not guarantee the matched string has well-formed syntax.
    """

    # Direct requests for a resource on the origin server.
    ORIGIN_FORM = "origin-form"
    # Mostly sent to proxies, but HTTP/1.1 servers must accept it too.
    ABSOLUTE_FORM = "absolute-form"
    # CONNECT requests through a proxy.
    AUTHORITY_FORM = "authority-form"
    # Server-wide OPTIONS requests.
    ASTERISK_FORM = "asterisk-form"

    @classmethod
    def parse(cls, target: str) -> RequestTarget:
        """Classify *target*. See :func:`classify_target`."""
        return classify_target(target)

    def permits(self, method: str) -> bool:
        """Return True if this form may be used with the given method.

        Args:
            method: The request method, compared case-sensitively.

        Returns:
            Whether RFC 7230 allows this form for the method.
        """
        if self is RequestTarget.ASTERISK_FORM:
            return method == "OPTIONS"
        if self is RequestTarget.AUTHORITY_FORM:
            return method == "CONNECT"
        return method != "CONNECT"


class ParseErrorKind(enum.Enum):
    """Why a request target was rejected."""

    EMPTY = "empty"
    INVALID = "invalid"


class ParseError(ValueError):
    """Raised when a string is not a valid request target."""

    def __init__(
        self,
        kind: ParseErrorKind,
        target: str = "",
        position: int | None = None,
    ) -> None:
        self.kind = kind
        self.target = target
        self.position = position

        if kind is ParseErrorKind.EMPTY:
            message = "Empty request target"
        else:
            message = f"Invalid request target: {target!r}"
            if position is not None:
                message += f" (at offset {position})"
        super().__init__(message)


def classify_target(target: str) -> RequestTarget:
    """Classify a request target into one of its four forms.

    Handles:
      - ``*`` exactly (asterisk-form)
      - anything starting with ``/`` (origin-form)
      - ``scheme://...`` (absolute-form)
      - ``host`` or ``host:port`` without any slash (authority-form)

    A colon not immediately followed by ``//`` commits the target to
    authority-form, so a later slash (``http:/x``, ``a:/b``) is invalid.

    Args:
        target: The target token alone, already split from the method
            and protocol version.

    Returns:
        The RequestTarget form of the string.

    Raises:
        ParseError: If the string is empty (EMPTY) or matches none of
            the four forms (INVALID).
    """
    if not target:
        raise ParseError(ParseErrorKind.EMPTY)

    # Surrounding whitespace belongs to the request line [RFC7230§3.1.1]
    if target[0].isspace():
        raise ParseError(ParseErrorKind.INVALID, target, position=0)
    if target[-1].isspace():
        raise ParseError(
            ParseErrorKind.INVALID, target, position=len(target.rstrip())
        )

    if target == "*":
        return RequestTarget.ASTERISK_FORM

    if target[0] == "/":
        return RequestTarget.ORIGIN_FORM

    # --- Scan for the scheme or port delimiter ---
    colon = -1
    for index, char in enumerate(target):
        if char == ":":
            colon = index
            break
        if char == "/":
            raise ParseError(ParseErrorKind.INVALID, target, position=index)

    if colon == -1:
        return RequestTarget.AUTHORITY_FORM

    if target.startswith("//", colon + 1):
        if colon == 0:
            # "://host" has no scheme
            raise ParseError(ParseErrorKind.INVALID, target, position=0)
        return RequestTarget.ABSOLUTE_FORM

    # --- host:port ---
    slash = target.find("/", colon + 1)
    if slash != -1:
        raise ParseError(ParseErrorKind.INVALID, target, position=slash)

    return RequestTarget.AUTHORITY_FORM
