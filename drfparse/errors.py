"""
Exceptions raised while parsing DRF strings.

Every error is terminal for the parse attempt that raised it. All of them
derive from DRFParseError, which is a ValueError so callers that only care
about "bad input" can catch the builtin.
"""

from typing import Optional


class DRFParseError(ValueError):
    """Raised when a DRF string (or a fragment of one) cannot be parsed.

    Attributes:
        text: The string being parsed
        position: Offset into ``text`` where parsing failed
        token: The offending token, if one could be isolated
        message: Human-readable description of the failure
    """

    def __init__(self, message: str, text: str = "", position: int = 0, token: Optional[str] = None):
        self.message = message
        self.text = text
        self.position = position
        self.token = token
        if token:
            super().__init__(f"{message}: {token!r} at position {position} in {text!r}")
        else:
            super().__init__(f"{message} at position {position} in {text!r}")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, text={self.text!r}, "
            f"position={self.position}, token={self.token!r})"
        )


class DeviceSyntaxError(DRFParseError):
    """Bad leading character, missing qualifier or empty device name."""


class UnknownQualifierError(DeviceSyntaxError):
    """Punctuation after the first device character is not a qualifier."""


class UnknownNameError(DRFParseError):
    """``.NAME`` matches no property or field alias for the active property."""


class PropertyMismatchError(DRFParseError):
    """Property override belongs to a different family than the qualifier."""


class FieldlessPropertyError(DRFParseError):
    """A field was supplied for a property that has no fields."""


class DuplicateFieldError(DRFParseError):
    """A field was supplied both before and after the range."""


class RangeError(DRFParseError):
    """Malformed range or range bounds violation."""


class EventSyntaxError(DRFParseError):
    """Malformed ``@...`` event specification."""


class UnknownExtraError(DRFParseError):
    """``<-NAME`` names an unknown extra."""


class TrailingInputError(DRFParseError):
    """Input left over after the full request grammar was consumed."""
