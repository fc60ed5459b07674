"""Parsing and validation of DIDs and DID URLs."""

from .did import Did, is_valid_base_did, parse
from .errors import (
    DIDParseError,
    MalformedDidError,
    MalformedKeyValueError,
    MissingIdentifierError,
    MissingMethodNameError,
    TrailingInputError,
)

__all__ = [
    "Did",
    "DIDParseError",
    "MalformedDidError",
    "MalformedKeyValueError",
    "MissingIdentifierError",
    "MissingMethodNameError",
    "TrailingInputError",
    "is_valid_base_did",
    "parse",
]
