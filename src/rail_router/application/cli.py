"""
railhop - command line entry point.

Reads one query (stdin or a file), prints the minimum hop count or
``Impossible``.

Usage:
    railhop < query.txt
    railhop --input query.txt --log-level INFO
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import BinaryIO, List, Optional

from src.hopsearch.exceptions import QueueCapacityError, ValidationError
from src.rail_router.adapters.readers.token_reader import TokenStreamReader
from src.rail_router.application.logging_setup import setup_logging
from src.rail_router.config import load_config
from src.rail_router.services.hop_query_service import HopQueryService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="railhop",
        description="Minimum railway/air hops between two cities",
    )
    parser.add_argument("--input", type=str, help="Query file (default: stdin)")
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: RAILHOP_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--queue-capacity",
        type=int,
        help="Initial BFS queue capacity (default: RAILHOP_QUEUE_CAPACITY or 128)",
    )
    parser.add_argument(
        "--max-queue-capacity",
        type=int,
        help="BFS queue growth limit (default: unbounded)",
    )
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[BinaryIO] = None) -> int:
    """
    Run one query and print the answer.

    Args:
        argv: Arguments (default: sys.argv[1:]).
        stdin: Byte stream used when --input is not given
            (default: sys.stdin.buffer).

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
        overrides = {}
        if args.log_level is not None:
            overrides["log_level"] = args.log_level
        if args.queue_capacity is not None:
            overrides["initial_queue_capacity"] = args.queue_capacity
        if args.max_queue_capacity is not None:
            overrides["max_queue_capacity"] = args.max_queue_capacity
        config = replace(config, **overrides)
    except ValueError as e:
        print(f"railhop: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    setup_logging(config.log_level_value)

    if args.input:
        try:
            reader = TokenStreamReader.from_path(args.input)
        except OSError as e:
            print(f"railhop: cannot read {args.input}: {e}", file=sys.stderr)
            return EXIT_BAD_INPUT
    else:
        reader = TokenStreamReader(stdin if stdin is not None else sys.stdin.buffer)

    service = HopQueryService(config)
    try:
        result = service.answer_from(reader)
    except ValidationError as e:
        logger.error("Invalid query: %s", e)
        print(f"railhop: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except QueueCapacityError as e:
        logger.error("Search aborted: %s", e)
        print(f"railhop: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except MemoryError:
        logger.error("Out of memory answering query")
        print("railhop: out of memory", file=sys.stderr)
        return EXIT_FAILURE

    print(result.format())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
