"""Parse a DID or DID URL from the command line."""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

import jsoncanon

from .did import is_valid_base_did, parse
from .errors import DIDParseError

LOGGER = logging.getLogger(__name__)


def format_result(result: dict, canonical: bool = False) -> str:
    if canonical:
        return jsoncanon.canonicalize(result).decode("utf-8")
    return json.dumps(result, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="parse a DID or DID URL")
    parser.add_argument(
        "--base",
        action="store_true",
        help="only check that the value is a bare DID (did:method:id)",
    )
    parser.add_argument(
        "--canonical", action="store_true", help="print canonical (JCS) JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument("didurl", help="the DID or DID URL to parse")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    status = 0
    if args.base:
        valid = is_valid_base_did(args.didurl)
        LOGGER.debug("Base DID check for %r: %s", args.didurl, valid)
        result = {"valid": valid}
        if not valid:
            status = 1
    else:
        try:
            result = parse(args.didurl).serialize()
        except DIDParseError as err:
            LOGGER.debug(
                "Failed to parse %r at position %s: %s",
                args.didurl,
                err.position,
                err.message,
            )
            result = err.serialize()
            status = 1

    print(format_result(result, canonical=args.canonical))
    return status


if __name__ == "__main__":
    sys.exit(main())
