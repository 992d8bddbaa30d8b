"""
Tabletop geometry: compass directions, their unit increments and the valid
coordinate range.

Turning relies on the order of DIRECTIONS: left walks forward through the
sequence, right walks backward.
"""

from collections.abc import Sequence

import numpy as np

DIRECTIONS: tuple[str, ...] = ("EAST", "NORTH", "WEST", "SOUTH")
DIRECTIONS_LENGTH: int = len(DIRECTIONS)

# Row i is the (dx, dy) step for DIRECTIONS[i]
DIRECTION_INCREMENTS: np.ndarray = np.array(
    [[1, 0], [0, 1], [-1, 0], [0, -1]], dtype=np.int64
)
DIRECTION_INCREMENTS.setflags(write=False)

OKAY_DIMENSION: range = range(0, 5)
MIN_COORDINATE: int = OKAY_DIMENSION[0]
MAX_COORDINATE: int = OKAY_DIMENSION[-1]


def is_direction(direction: object) -> bool:
    return direction in DIRECTIONS


def increment_for(direction: str) -> np.ndarray:
    """Unit displacement for a compass direction (KeyError if unknown)."""
    if direction not in DIRECTIONS:
        raise KeyError(direction)
    return DIRECTION_INCREMENTS[DIRECTIONS.index(direction)]


def within_table(position: Sequence[int]) -> bool:
    """True when every coordinate lies in OKAY_DIMENSION."""
    coords = np.asarray(position)
    return bool(np.all((coords >= MIN_COORDINATE) & (coords <= MAX_COORDINATE)))
