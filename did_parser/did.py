"""DID and DID URL parsing."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

from .errors import DIDParseError, TrailingInputError
from .grammar import (
    parse_base_did,
    parse_fragment,
    parse_method_params,
    parse_path,
    parse_query,
)


def _frozen_pairs(pairs: Optional[Mapping]) -> Optional[Mapping]:
    if pairs is None:
        return None
    return MappingProxyType(dict(pairs))


@dataclass(frozen=True)
class Did:
    """A parsed DID or DID URL as defined by Decentralized Identifiers 1.0.

    Method parameters and query are read-only mappings and the path is a
    tuple, so a parsed value cannot be changed after construction.
    """

    method: str
    id: str
    method_params: Optional[Mapping[str, str]] = None
    path: Optional[Tuple[str, ...]] = None
    query: Optional[Mapping[str, str]] = None
    frag: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "method_params", _frozen_pairs(self.method_params))
        if self.path is not None:
            object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "query", _frozen_pairs(self.query))

    def __hash__(self) -> int:
        return hash(
            (
                self.method,
                self.id,
                frozenset(self.method_params.items())
                if self.method_params is not None
                else None,
                self.path,
                frozenset(self.query.items()) if self.query is not None else None,
                self.frag,
            )
        )

    @classmethod
    def parse(cls, value: str) -> "Did":
        """Parse a DID or DID URL.

        Raises:
            DIDParseError: on invalid inputs

        """
        return parse(value)

    @classmethod
    def decode(cls, value: str) -> "Did":
        """Parse a DID or DID URL. Alias of `Did.parse`."""
        return parse(value)

    @staticmethod
    def is_valid_base_did(value: str) -> bool:
        """Check that a value is a bare DID, without any DID URL components."""
        return is_valid_base_did(value)

    @property
    def root(self) -> "Did":
        """Access this DID without any parameters, path, query, or fragment."""
        return Did(method=self.method, id=self.id)

    @property
    def is_base(self) -> bool:
        return (
            self.method_params is None
            and self.path is None
            and self.query is None
            and self.frag is None
        )

    def serialize(self) -> dict:
        return {
            "method": self.method,
            "id": self.id,
            "methodParams": (
                dict(self.method_params) if self.method_params is not None else None
            ),
            "path": list(self.path) if self.path is not None else None,
            "query": dict(self.query) if self.query is not None else None,
            "fragment": self.frag,
        }


def parse(value: str) -> Did:
    """Parse a DID or DID URL, requiring the whole input to be consumed.

    Components are recognized in a fixed order (method parameters, path,
    query, fragment) in a single forward pass.

    Raises:
        TypeError: if the value is not a string
        DIDParseError: on invalid inputs

    """
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got: {type(value).__name__}")
    (method, ident), pos = parse_base_did(value)
    method_params, pos = parse_method_params(value, pos)
    path, pos = parse_path(value, pos)
    query, pos = parse_query(value, pos)
    frag, pos = parse_fragment(value, pos)
    if pos < len(value):
        raise TrailingInputError(f"Unexpected character: {value[pos]!r}", pos)
    return Did(
        method=method,
        id=ident,
        method_params=method_params,
        path=path,
        query=query,
        frag=frag,
    )


def is_valid_base_did(value: str) -> bool:
    """Verify that a value is a structurally correct `did:method:id`.

    DID URL components are not accepted: any parameters, path, query or
    fragment make the result `False`.
    """
    if not isinstance(value, str):
        return False
    try:
        _, pos = parse_base_did(value)
    except DIDParseError:
        return False
    return pos == len(value)
