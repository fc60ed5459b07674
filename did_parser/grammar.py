"""Sub-parsers for the productions of the DID URL grammar.

Each parser takes the input string and a start offset and returns the
parsed value together with the offset of the first unconsumed character.
Optional productions return ``None`` and the unchanged offset when their
leading delimiter is absent.

```
did                = "did:" method-name ":" method-specific-id
method-name        = 1*method-char
method-char        = %x61-7A / DIGIT
method-specific-id = *idchar *( ":" *idchar )
idchar             = ALPHA / DIGIT / "." / "-" / "_"
did-url            = did *( ";" param ) path-abempty [ "?" query ]
                     [ "#" fragment ]
param              = param-name [ "=" param-value ]
param-name         = 1*param-char
param-value        = *param-char
param-char         = ALPHA / DIGIT / "." / "-" / "_" / ":" /
                     pct-encoded
```

Percent-encoded characters are not recognized, and the method-specific ID
is scanned as a single run of ``idchar`` (a ``:`` ends it).
"""

import re
from typing import Dict, List, Optional, Tuple

from .const import (
    FRAGMENT_CHARS,
    FRAGMENT_DELIM,
    ID_CHARS,
    KEY_VALUE_DELIM,
    METHOD_CHARS,
    PARAM_CHARS,
    PARAM_DELIM,
    PATH_CHARS,
    PATH_DELIM,
    QUERY_DELIM,
    QUERY_PAIR_DELIM,
    SCHEME,
    SEPARATOR,
)
from .errors import (
    MalformedDidError,
    MalformedKeyValueError,
    MissingIdentifierError,
    MissingMethodNameError,
)


def take_while(pattern: re.Pattern, value: str, pos: int) -> Tuple[str, int]:
    """Consume the longest (possibly empty) run matching a character class."""
    end = pattern.match(value, pos).end()
    return value[pos:end], end


def expect(literal: str, value: str, pos: int) -> int:
    """Consume a literal token, raising if it is not present."""
    if not value.startswith(literal, pos):
        raise MalformedDidError(f"Expected '{literal}'", pos)
    return pos + len(literal)


def parse_scheme(value: str, pos: int = 0) -> int:
    pos = expect(SCHEME, value, pos)
    return expect(SEPARATOR, value, pos)


def parse_method_name(value: str, pos: int) -> Tuple[str, int]:
    """Parse the method (registry) name.

    method-name: 1*method-char
    method-char  = %x61-7A / DIGIT
    """
    if pos >= len(value) or value.startswith(SEPARATOR, pos):
        raise MissingMethodNameError("Missing method name", pos)
    method, end = take_while(METHOD_CHARS, value, pos)
    if not method:
        raise MissingMethodNameError(
            f"Missing method name before: {value[pos]!r}", pos
        )
    return method, end


def parse_did_identifier(value: str, pos: int) -> Tuple[str, int]:
    """Parse the method-specific identifier.

    The run ends at the first character outside ``idchar`` or at the end of
    the input, and may be empty when a URL component follows directly.
    """
    if pos >= len(value):
        raise MissingIdentifierError("Missing DID identifier", pos)
    return take_while(ID_CHARS, value, pos)


def parse_base_did(value: str, pos: int = 0) -> Tuple[Tuple[str, str], int]:
    """Parse the mandatory `did:method:id` prefix."""
    pos = parse_scheme(value, pos)
    method, pos = parse_method_name(value, pos)
    pos = expect(SEPARATOR, value, pos)
    ident, pos = parse_did_identifier(value, pos)
    return (method, ident), pos


def parse_key_value_pair(value: str, pos: int) -> Tuple[Tuple[str, str], int]:
    """Parse a `name=value` pair; the `=` is mandatory."""
    key, end = take_while(PARAM_CHARS, value, pos)
    if not key:
        raise MalformedKeyValueError("Missing parameter name", pos)
    if not value.startswith(KEY_VALUE_DELIM, end):
        raise MalformedKeyValueError(f"Expected '=' after parameter: {key}", end)
    val, end = take_while(PARAM_CHARS, value, end + len(KEY_VALUE_DELIM))
    return (key, val), end


def parse_key_value_list(
    value: str, pos: int, delim: str
) -> Tuple[Dict[str, str], int]:
    """Parse one or more pairs separated by `delim`.

    Later pairs replace earlier pairs with the same name.
    """
    pairs = {}
    while True:
        (key, val), pos = parse_key_value_pair(value, pos)
        pairs[key] = val
        if not value.startswith(delim, pos):
            return pairs, pos
        pos += len(delim)


def parse_method_params(value: str, pos: int) -> Tuple[Optional[Dict[str, str]], int]:
    """Parse method-specific parameters: `;name=dave;lang=py`."""
    if not value.startswith(PARAM_DELIM, pos):
        return None, pos
    return parse_key_value_list(value, pos + len(PARAM_DELIM), PARAM_DELIM)


def parse_path(value: str, pos: int) -> Tuple[Optional[List[str]], int]:
    """Parse a path into its segments: `/a/b/c`.

    Empty segments are kept, so `/a//b` yields `["a", "", "b"]`.
    """
    if not value.startswith(PATH_DELIM, pos):
        return None, pos
    segments = []
    while value.startswith(PATH_DELIM, pos):
        segment, pos = take_while(PATH_CHARS, value, pos + len(PATH_DELIM))
        segments.append(segment)
    return segments, pos


def parse_query(value: str, pos: int) -> Tuple[Optional[Dict[str, str]], int]:
    """Parse a query into name/value pairs: `?name=bob&lang=py`."""
    if not value.startswith(QUERY_DELIM, pos):
        return None, pos
    return parse_key_value_list(value, pos + len(QUERY_DELIM), QUERY_PAIR_DELIM)


def parse_fragment(value: str, pos: int) -> Tuple[Optional[str], int]:
    # nothing may follow a fragment (RFC 3986)
    if not value.startswith(FRAGMENT_DELIM, pos):
        return None, pos
    return take_while(FRAGMENT_CHARS, value, pos + len(FRAGMENT_DELIM))
