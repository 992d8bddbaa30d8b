"""
Pytest configuration and shared fixtures for the toy robot tests.

Provides fresh robots and processors for each test, plus helpers for feeding
multi-line scripts through a processor.
"""

import os
import sys

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from toyrobot.robot import Robot
from toyrobot.runner.processor import CommandProcessor
from toyrobot.safe_robot import SafeRobot


@pytest.fixture
def robot() -> Robot:
    """Raw robot with the default direction normalization policy."""
    return Robot(normalize_direction=True)


@pytest.fixture
def placed_robot(robot) -> Robot:
    """Raw robot already standing at [0, 0] facing EAST."""
    robot.place()
    return robot


@pytest.fixture
def safe_robot() -> SafeRobot:
    return SafeRobot(Robot(normalize_direction=True), report_requires_place=True)


@pytest.fixture
def processor(safe_robot) -> CommandProcessor:
    return CommandProcessor(safe_robot)


@pytest.fixture
def run_script(processor):
    """
    Feed a multi-line script and return the concatenated responses, the way an
    interactive session would print them.
    """

    def _run(script: str) -> str:
        return "".join(processor.process_line(line) for line in script.splitlines(keepends=True))

    return _run
