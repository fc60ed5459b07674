"""Errors raised while parsing a DID or DID URL."""

from typing import ClassVar, Optional


class DIDParseError(ValueError):
    """Base class for DID parsing failures."""

    error: ClassVar[str] = "invalidDid"

    def __init__(self, message: str = None, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def serialize(self) -> dict:
        return {
            "error": self.error,
            "errorMessage": self.message,
            "position": self.position,
        }


class MalformedDidError(DIDParseError):
    """A literal or separator did not match."""

    error = "malformedDid"


class MissingMethodNameError(DIDParseError):
    """No method name follows the `did:` scheme."""

    error = "missingMethodName"


class MissingIdentifierError(DIDParseError):
    """The input ends where the method-specific identifier should start."""

    error = "missingIdentifier"


class MalformedKeyValueError(DIDParseError):
    """A parameter or query pair lacks its `=` or its name."""

    error = "malformedKeyValue"


class TrailingInputError(DIDParseError):
    """Unparsed input remains after the last recognized component."""

    error = "trailingInput"
