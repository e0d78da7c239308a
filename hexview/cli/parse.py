"""
Parse CLI command

Resolves freeform tokens into canonical cell identifiers.
"""

import argparse
import json
import sys

from hexview.cells.resolver import resolve_tokens


def run_parse(args: argparse.Namespace) -> None:
    """Run the parse command"""
    result = resolve_tokens(args.tokens)

    if args.json:
        print(json.dumps({"cells": result.cells, "rejected": result.rejected}))
        return

    for cell in result.cells:
        print(cell)
    if result.rejected:
        print(f"{result.rejected_count} token(s) could not be parsed", file=sys.stderr)
