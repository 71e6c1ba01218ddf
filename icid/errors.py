"""
Error types for the IC-ID protocol codecs.

Every failure raised by this package derives from ProtocolError. The concrete
types also derive from ValueError, since each one reports a malformed input
value rather than a failing operation.
"""


class ProtocolError(Exception):
    """Base class for IC-ID protocol errors."""


class MalformedUrlError(ProtocolError, ValueError):
    """A URL could not be parsed as an absolute URL."""

    def __init__(self, url, reason: str = "not an absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed URL {url!r}: {reason}")


class ValidationError(ProtocolError, ValueError):
    """A decoded bearer token does not have the expected shape."""


class MalformedTokenError(ValidationError):
    """A bearer token is not hex-encoded UTF-8 JSON."""


class IdentifierParseError(ProtocolError, ValueError):
    """A principal identifier text is malformed."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid principal text {text!r}: {reason}")


class MalformedParameterError(ProtocolError, ValueError):
    """A query parameter carries a value outside its wire format."""

    def __init__(self, name: str, value: str, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name} parameter {value!r}: {reason}")


__all__ = [
    "ProtocolError",
    "MalformedUrlError",
    "ValidationError",
    "MalformedTokenError",
    "IdentifierParseError",
    "MalformedParameterError",
]
