"""
Base abstractions and helpers for command implementations.
"""
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional, Tuple
import logging
import re

from toyrobot import table
from toyrobot.config import TRACE
from toyrobot.protocol import messages
from toyrobot.safe_robot import SafeRobot


logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


class ArgumentError(ValueError):
    """A command line argument failed validation; str() is the user message."""


# Parsing utilities (lightweight, shared)
def parse_coordinate(token: str) -> int:
    """Parse one coordinate token, enforcing digits only and the table range."""
    if not _DIGITS.fullmatch(token):
        raise ArgumentError(messages.NOT_A_NONNEGATIVE_INTEGER)
    digits = token.lstrip("0") or "0"
    # Longer than the widest coordinate is out of range without converting
    if len(digits) > len(str(table.MAX_COORDINATE)):
        raise ArgumentError(messages.EXCEEDS_TABLE)
    value = int(digits)
    if value not in table.OKAY_DIMENSION:
        raise ArgumentError(messages.EXCEEDS_TABLE)
    return value


def expect_no_args(parts: List[str]) -> None:
    """Ensure parts holds only the keyword."""
    if len(parts) > 1:
        raise ArgumentError(messages.NO_ARGUMENTS_ALLOWED)


class CommandBase(ABC):
    """
    Reusable base for commands with shared parsing lifecycle and logging helpers.
    """
    # Set by @register_command decorator
    _registered_name: ClassVar[str] = ""

    __slots__ = ()

    @property
    def name(self) -> str:
        return self._registered_name or type(self).__name__

    # Logging helpers (uniform, include command identity)
    def log_trace(self, msg: str, *args: Any) -> None:
        logger.log(TRACE, "[%s] " + msg, self.name, *args)

    def log_debug(self, msg: str, *args: Any) -> None:
        logger.debug("[%s] " + msg, self.name, *args)

    @abstractmethod
    def do_match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate the tokenized line and capture its arguments.

        Args:
            parts: Lower-cased tokens, keyword first (e.g., ['place', '1', '2', 'north'])

        Returns:
            Tuple of (can_handle, error_message)
            - can_handle: True if the arguments are acceptable
            - error_message: user-facing message when they are not
        """
        raise NotImplementedError

    def match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        """
        Wrapper that guards subclass do_match() so argument errors come back as
        messages rather than exceptions.
        """
        try:
            return self.do_match(parts)
        except ArgumentError as e:
            self.log_debug("rejected %s: %s", parts, e)
            return False, str(e)

    @abstractmethod
    def execute(self, robot: SafeRobot) -> str:
        """
        Apply the command to the robot and return its status or report string.
        """
        raise NotImplementedError


class MotionCommand(CommandBase):
    """
    Base class for commands that change the robot's state through a guarded
    SafeRobot operation and take no arguments.
    """

    __slots__ = ()

    def do_match(self, parts: List[str]) -> Tuple[bool, Optional[str]]:
        expect_no_args(parts)
        self.log_trace("Parsed %s command", self.name)
        return (True, None)
