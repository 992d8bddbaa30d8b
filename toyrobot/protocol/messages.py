"""
User-facing status strings and report formatting.

Every response a command line can produce is either the empty string, one of
the constants below, or a report built by format_report().
"""

from collections.abc import Sequence

from toyrobot import table

OK: str = ""

# Structural errors, raised while parsing a line
NO_ARGUMENTS_ALLOWED: str = "That command allows no arguments"
TOO_FEW_ARGUMENTS: str = "Too few arguments"
TOO_MANY_ARGUMENTS: str = "Too many arguments"
NOT_A_NONNEGATIVE_INTEGER: str = "Argument must be a nonnegative integer"
EXCEEDS_TABLE: str = f"Argument must not exceed {table.MAX_COORDINATE}"
INVALID_KEYWORD: str = "Invalid keyword"

# State errors, produced by SafeRobot
MUST_PLACE_FIRST: str = "Must start with a valid Place command"
INVALID: str = "Invalid"

COMMANDS: str = "Place, Left, Right, Move & Report"
WELCOME: str = f"Welcome to the toy robot. Commands are {COMMANDS}."


def format_report(position: Sequence[int], direction: str) -> str:
    """
    Render a robot state as ``At [x, y], facing DIRECTION``.
    """
    x, y = position
    return f"At [{int(x)}, {int(y)}], facing {direction}"
