"""
Toy Robot Python Package

Simulates a toy robot on a 5x5 tabletop driven by text commands.

Key components:
- Robot: unchecked state machine with one-step undo
- SafeRobot: validating wrapper that guards, checks and reverts
- CommandProcessor: tokenizes command lines and dispatches them
"""

from ._version import __version__
from .robot import Robot, RobotState
from .runner.processor import CommandProcessor
from .safe_robot import SafeRobot

__all__ = [
    "__version__",
    "Robot",
    "RobotState",
    "SafeRobot",
    "CommandProcessor",
]
