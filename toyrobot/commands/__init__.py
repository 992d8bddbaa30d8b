"""
Commands package for the toy robot.
"""

from toyrobot.commands.base import ArgumentError, CommandBase, MotionCommand

__all__ = [
    "ArgumentError",
    "CommandBase",
    "MotionCommand",
]
