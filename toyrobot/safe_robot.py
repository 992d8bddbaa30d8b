"""
Validated wrapper around the raw Robot.

Each mutating call is attempted speculatively: the guard refuses to act while
the robot is unplaced, and the check-after reverts any result that falls off
the table.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from toyrobot import config
from toyrobot.protocol import messages
from toyrobot.robot import Robot

logger = logging.getLogger(__name__)


class SafeRobot:
    """
    Robot facade returning status strings instead of accepting bad states.

    Returns "" on success, MUST_PLACE_FIRST when the guard refuses, and
    INVALID when the attempted result was rolled back.
    """

    __slots__ = ("_robot", "report_requires_place")

    def __init__(
        self,
        robot: Robot | None = None,
        *,
        report_requires_place: bool | None = None,
    ) -> None:
        self._robot = robot if robot is not None else Robot()
        self.report_requires_place = (
            config.REPORT_REQUIRES_PLACE if report_requires_place is None else report_requires_place
        )

    @property
    def robot(self) -> Robot:
        return self._robot

    @property
    def position(self) -> tuple[int, int]:
        return self._robot.position

    @property
    def direction(self) -> str:
        return self._robot.direction

    def is_valid(self) -> bool:
        return self._robot.is_valid()

    def guard(self) -> str:
        return messages.OK if self._robot.is_valid() else messages.MUST_PLACE_FIRST

    def check_after(self) -> str:
        if self._robot.is_valid():
            return messages.OK
        logger.debug("Rejected %r, reverting", self._robot)
        self._robot.revert()
        return messages.INVALID

    def _guarded(self, operation: Callable[[], None]) -> str:
        s = self.guard()
        if s:
            return s
        operation()
        return self.check_after()

    def move(self) -> str:
        return self._guarded(self._robot.move)

    def turn_left(self) -> str:
        return self._guarded(self._robot.turn_left)

    def turn_right(self) -> str:
        return self._guarded(self._robot.turn_right)

    def place(
        self,
        position: Sequence[int] = config.DEFAULT_POSITION,
        direction: str = config.DEFAULT_DIRECTION,
    ) -> str:
        # Always attempted so the first command can bring the robot onto the table
        self._robot.place(position, direction)
        return self.check_after()

    def report(self) -> str:
        if self.report_requires_place:
            s = self.guard()
            if s:
                return s
        return messages.format_report(self.position, self.direction)

    def __repr__(self) -> str:
        return f"SafeRobot({self._robot!r})"
