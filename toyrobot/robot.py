"""
Unchecked robot state machine.

Robot applies geometric transitions without asking whether the result lands on
the table; SafeRobot layers the validity checks on top. Every mutation first
snapshots the current state so a single revert() can undo it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from toyrobot import config, table
from toyrobot.config import TRACE
from toyrobot.utils.errors import RobotContractError

logger = logging.getLogger(__name__)

UNPLACED_DIRECTION: str = "bad"
UNPLACED_POSITION: tuple[int, int] = (table.MIN_COORDINATE - 1, table.MIN_COORDINATE - 1)


@dataclass(frozen=True)
class RobotState:
    """Position and heading at one instant."""

    position: tuple[int, int] = UNPLACED_POSITION
    direction: str = UNPLACED_DIRECTION

    def is_valid(self) -> bool:
        return table.within_table(self.position) and table.is_direction(self.direction)


def _as_position(position: Sequence[int]) -> tuple[int, int]:
    x, y = position
    return int(x), int(y)


class Robot:
    """
    Raw robot holding the current state and a one-step undo snapshot.

    Construction leaves the robot unplaced: off the table and facing a
    direction that is not on the compass.
    """

    __slots__ = ("_state", "previous_state", "normalize_direction")

    def __init__(self, normalize_direction: bool | None = None) -> None:
        self._state = RobotState()
        self.previous_state = self._state
        self.normalize_direction = (
            config.NORMALIZE_DIRECTION if normalize_direction is None else normalize_direction
        )

    @property
    def state(self) -> RobotState:
        return self._state

    @property
    def position(self) -> tuple[int, int]:
        return self._state.position

    @property
    def direction(self) -> str:
        return self._state.direction

    def _transition(self, new_state: RobotState) -> None:
        self.previous_state, self._state = self._state, new_state
        logger.log(TRACE, "transition %s -> %s", self.previous_state, new_state)

    def place(
        self,
        position: Sequence[int] = config.DEFAULT_POSITION,
        direction: str = config.DEFAULT_DIRECTION,
    ) -> None:
        if self.normalize_direction:
            direction = direction.upper()
        self._transition(RobotState(_as_position(position), direction))

    def reposition(self, position: Sequence[int]) -> None:
        self._transition(RobotState(_as_position(position), self._state.direction))

    def orient(self, direction: str) -> None:
        self._transition(RobotState(self._state.position, direction))

    def move(self) -> None:
        """Step one square forward; the target may be off the table."""
        if not table.is_direction(self.direction):
            raise RobotContractError(f"cannot move while facing {self.direction!r}")
        new_position = np.add(self.position, table.increment_for(self.direction))
        self.reposition(new_position)

    def turn(self, step: int) -> None:
        """Rotate one compass point: +1 is left, -1 is right."""
        if step not in (-1, 1):
            raise RobotContractError(f"turn step must be +1 or -1, got {step!r}")
        if not table.is_direction(self.direction):
            raise RobotContractError(f"cannot turn while facing {self.direction!r}")
        which = table.DIRECTIONS.index(self.direction)
        index = (table.DIRECTIONS_LENGTH + which + step) % table.DIRECTIONS_LENGTH
        self.orient(table.DIRECTIONS[index])

    def turn_left(self) -> None:
        self.turn(1)

    def turn_right(self) -> None:
        self.turn(-1)

    def revert(self) -> None:
        """Swap back to the snapshot taken before the last mutation."""
        self._state, self.previous_state = self.previous_state, self._state
        logger.debug("reverted to %s", self._state)

    def is_valid(self) -> bool:
        return self._state.is_valid()

    def __repr__(self) -> str:
        return f"Robot(position={self.position}, direction={self.direction!r})"
