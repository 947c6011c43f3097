"""Evaluate program strings given on the command line and print their values.

    python -m iota "(define r 10)" "(* pi (* r r))"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from iota.config import apply_recursion_limit, configure_logging
from iota.debug_utils.pprint import to_string
from iota.errors import IotaError
from iota.interpreter import Interpreter

logger = logging.getLogger("iota")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iota",
        description="Evaluate s-expression programs and print each result.",
    )
    parser.add_argument("programs", nargs="+", metavar="PROGRAM",
                        help="program text; evaluated in order")
    parser.add_argument("--fresh", action="store_true",
                        help="evaluate each program in its own environment")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    apply_recursion_limit()

    interp = Interpreter()
    for program in args.programs:
        if args.fresh:
            interp = Interpreter()
        try:
            result = interp.eval(program)
        except IotaError as e:
            logger.error("%s: %s: %s", program, type(e).__name__, e)
            return 1
        print(f"{program} = {to_string(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
