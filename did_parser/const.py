"""Grammar constants for DID and DID URL parsing."""

import re

SCHEME = "did"
SEPARATOR = ":"

PARAM_DELIM = ";"
PATH_DELIM = "/"
QUERY_DELIM = "?"
QUERY_PAIR_DELIM = "&"
FRAGMENT_DELIM = "#"
KEY_VALUE_DELIM = "="

# method-char = %x61-7A / DIGIT
METHOD_CHARS = re.compile(r"[a-z0-9]*")
# idchar = ALPHA / DIGIT / "." / "-" / "_"
ID_CHARS = re.compile(r"[A-Za-z0-9._\-]*")
# param-char, pct-encoded is not supported
PARAM_CHARS = re.compile(r"[A-Za-z0-9._:\-]*")
PATH_CHARS = re.compile(r"[A-Za-z0-9]*")
FRAGMENT_CHARS = re.compile(r"[A-Za-z0-9/?:@]*")
