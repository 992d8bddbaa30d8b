"""
Robot Commands
Contains the tabletop commands: Place, Move, Left, Right and Report
"""

import logging

from toyrobot import config
from toyrobot.runner.command_registry import register_command
from toyrobot.protocol import messages
from toyrobot.safe_robot import SafeRobot

from .base import (
    CommandBase,
    MotionCommand,
    expect_no_args,
    parse_coordinate,
)

logger = logging.getLogger(__name__)


@register_command("PLACE")
class PlaceCommand(CommandBase):
    """
    Put the robot on the table, optionally at a given square and heading.

    Formats:
        PLACE
        PLACE x, y
        PLACE x, y, DIRECTION
    """

    __slots__ = ("position", "direction")

    def __init__(self) -> None:
        self.position: tuple[int, int] = config.DEFAULT_POSITION
        self.direction: str = config.DEFAULT_DIRECTION

    def do_match(self, parts: list[str]) -> tuple[bool, str | None]:
        args = parts[1:]
        if len(args) == 1:
            return (False, messages.TOO_FEW_ARGUMENTS)
        if len(args) > 3:
            return (False, messages.TOO_MANY_ARGUMENTS)
        if args:
            self.position = (parse_coordinate(args[0]), parse_coordinate(args[1]))
        if len(args) == 3:
            self.direction = args[2]
        self.log_trace("Parsed PLACE at %s facing %s", self.position, self.direction)
        return (True, None)

    def execute(self, robot: SafeRobot) -> str:
        return robot.place(self.position, self.direction)


@register_command("MOVE")
class MoveCommand(MotionCommand):
    """Step one square forward."""

    __slots__ = ()

    def execute(self, robot: SafeRobot) -> str:
        return robot.move()


@register_command("LEFT")
class LeftCommand(MotionCommand):
    """Rotate 90 degrees counter-clockwise."""

    __slots__ = ()

    def execute(self, robot: SafeRobot) -> str:
        return robot.turn_left()


@register_command("RIGHT")
class RightCommand(MotionCommand):
    """Rotate 90 degrees clockwise."""

    __slots__ = ()

    def execute(self, robot: SafeRobot) -> str:
        return robot.turn_right()


@register_command("REPORT")
class ReportCommand(CommandBase):
    """Describe the current position and heading; never changes state."""

    __slots__ = ()

    def do_match(self, parts: list[str]) -> tuple[bool, str | None]:
        expect_no_args(parts)
        return (True, None)

    def execute(self, robot: SafeRobot) -> str:
        return robot.report()
