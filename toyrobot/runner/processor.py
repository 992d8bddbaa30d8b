"""
Line-oriented command processing.

CommandProcessor turns raw text lines into status strings: it tokenizes a
line, resolves the keyword through the command registry, lets the command
validate its own arguments, then runs it against the owned SafeRobot.
"""

from __future__ import annotations

import logging
import re

from toyrobot.protocol import messages
from toyrobot.runner.command_registry import create_command_from_parts
from toyrobot.safe_robot import SafeRobot

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


class CommandProcessor:
    """Owns one SafeRobot and feeds it one command line at a time."""

    def __init__(self, robot: SafeRobot | None = None) -> None:
        self.robot = robot if robot is not None else SafeRobot()

    @staticmethod
    def tokenize(line: str) -> list[str]:
        """Split on commas and/or whitespace and lower-case every token."""
        return [t.lower() for t in _SEPARATORS.split(line.strip()) if t]

    def process_line(self, raw_line: str = "") -> str:
        """
        Process one command line and return the response string.

        Blank lines return "" and never touch the robot. User errors come back
        as messages; only broken robot contracts raise.
        """
        tokens = self.tokenize(raw_line.rstrip("\r\n"))
        if not tokens:
            return messages.OK

        command, error = create_command_from_parts(tokens)
        if command is None:
            result = error if error is not None else messages.INVALID_KEYWORD
            logger.debug("Rejected %r: %s", raw_line, result)
            return result

        result = command.execute(self.robot)
        logger.debug("%s -> %r", command.name, result)
        return result

    def feed(self, text: str = "") -> list[str]:
        """Process a block of text line by line, returning every response."""
        return [self.process_line(line) for line in text.splitlines()]

    @staticmethod
    def startup_message() -> str:
        return messages.WELCOME
