"""
Usage: passval [-h] [--workers N] [--verbose]

Interactively validate passwords against the composition rules.

optional arguments:
  -h, --help   show this help message and exit
  --workers N  number of concurrent validation workers (default 4)
  --verbose    log debug output and print a summary to stderr
"""

import argparse
import logging
import os
import time

from rich.console import Console
from rich.logging import RichHandler

from passval.prompt import POOL_SIZE, PasswordPrompt

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def worker_count(value: str) -> int:
    try:
        workers = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid worker count: {value!r}")
    if workers < 1:
        raise argparse.ArgumentTypeError("worker count must be at least 1")
    return workers


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Interactively validate passwords against the composition rules."
    )
    parser.add_argument(
        "--workers",
        type=worker_count,
        default=POOL_SIZE,
        metavar="N",
        help=f"number of concurrent validation workers (default {POOL_SIZE})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log debug output and print a summary to stderr",
    )

    args = parser.parse_args(argv)
    verbose = args.verbose or os.getenv("PASSVAL_DEBUG", "") not in ("", "0")
    configure_logging(verbose)

    start = time.time()
    summary = PasswordPrompt(workers=args.workers).run()

    if verbose:
        console.print(
            "Validated {0} passwords ({1} valid) in {2:.2f} seconds".format(
                summary.checked, summary.valid, time.time() - start
            )
        )
    return 0


if __name__ == "__main__":
    main()
