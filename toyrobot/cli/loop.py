"""
CLI entry point for the toyrobot command.

Prints the welcome banner, then reads one command per line from a file or
stdin and prints every non-empty response.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from toyrobot import config
from toyrobot.config import TRACE
from toyrobot.robot import Robot
from toyrobot.runner.processor import CommandProcessor
from toyrobot.safe_robot import SafeRobot

logger = logging.getLogger(__name__)


def run_loop(processor: CommandProcessor, stream: TextIO, out: TextIO) -> int:
    """Process every line of stream, writing non-empty responses to out."""
    count = 0
    for line in stream:
        result = processor.process_line(line)
        count += 1
        if result:
            print(result, file=out)
    logger.info("Processed %d lines", count)
    return count


def _resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == "TRACE":
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    if config.TRACE_ENABLED:
        return TRACE
    return getattr(logging, config.LOG_LEVEL_DEFAULT, logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Toy robot tabletop simulator")
    parser.add_argument("input", nargs="?", help="File of commands (default: stdin)")
    parser.add_argument(
        "--report-anytime",
        action="store_true",
        help="Answer REPORT even before the first valid PLACE",
    )
    parser.add_argument(
        "--keep-direction-case",
        action="store_true",
        help=(
            "Store the PLACE direction exactly as typed instead of upper-casing it; "
            "tokens are lower-cased, so any PLACE naming a direction answers Invalid"
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set specific log level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the simulator."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=_resolve_log_level(args),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    robot = SafeRobot(
        Robot(normalize_direction=False if args.keep_direction_case else None),
        report_requires_place=False if args.report_anytime else None,
    )
    processor = CommandProcessor(robot)
    print(processor.startup_message())

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as stream:
                run_loop(processor, stream, sys.stdout)
        else:
            run_loop(processor, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read commands: {e}")
        return 1
    return 0


def main_entry():
    """Entry point for the toyrobot command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
