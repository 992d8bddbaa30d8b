"""
Unit tests for CommandProcessor: tokenizing, validation order and end-to-end
command sequences.
"""

import pytest

from toyrobot import table
from toyrobot.robot import Robot
from toyrobot.runner.processor import CommandProcessor
from toyrobot.utils.errors import RobotContractError


def test_basic_input(run_script):
    assert run_script("PLACE\nREPORT\n") == "At [0, 0], facing EAST"


def test_coordinate_arguments_accepted(processor):
    processor.process_line("place 2 3")
    assert processor.process_line("report") == "At [2, 3], facing EAST"


def test_coordinate_and_direction_arguments_accepted(processor):
    processor.process_line("place 2 3 west")
    assert processor.process_line("report") == "At [2, 3], facing WEST"


def test_coordinate_arguments_out_of_range_rejected(processor):
    assert processor.process_line("place 0 5") == "Argument must not exceed 4"
    assert processor.process_line("place 5 0") == "Argument must not exceed 4"


def test_noninteger_coordinate_arguments_rejected(processor):
    assert processor.process_line("place a 0") == "Argument must be a nonnegative integer"
    assert processor.process_line("place 0 a") == "Argument must be a nonnegative integer"


def test_overfew_place_arguments_rejected(processor):
    assert processor.process_line("place 1") == "Too few arguments"


def test_overmany_place_arguments_rejected(processor):
    assert processor.process_line("place 1,2,a,b") == "Too many arguments"


@pytest.mark.parametrize("line", ["left a", "move a", "report a", "right a"])
def test_extra_arguments_rejected(processor, line):
    processor.process_line("place")
    assert processor.process_line(line) == "That command allows no arguments"


def test_rejected_lines_do_not_touch_the_robot(processor):
    processor.process_line("place 1 1 north")
    for line in ("place 9 9", "move a", "place 1", "jump"):
        processor.process_line(line)
    assert processor.process_line("report") == "At [1, 1], facing NORTH"


@pytest.mark.parametrize("line", ["", "\n", "   ", " , ,\n"])
def test_null_input(processor, line):
    assert processor.process_line(line) == ""


def test_default_argument_is_null_input(processor):
    assert processor.process_line() == ""


@pytest.mark.parametrize("line", ["jump", "fly 1 2", "placed", "5 5"])
def test_unknown_keyword(processor, line):
    assert processor.process_line(line) == "Invalid keyword"


def test_keyword_is_case_insensitive(processor):
    assert processor.process_line("PlAcE 1, 2, sOuTh") == ""
    assert processor.process_line("RePoRt") == "At [1, 2], facing SOUTH"


def test_prescribed_input_case_letter_a(run_script):
    script = "PLACE 0,0,NORTH\nMOVE\nREPORT\n"
    assert run_script(script) == "At [0, 1], facing NORTH"


def test_prescribed_input_case_letter_b(run_script):
    script = "PLACE 0,0,NORTH\nLEFT\nREPORT\n"
    assert run_script(script) == "At [0, 0], facing WEST"


def test_prescribed_input_case_letter_c(run_script):
    script = "PLACE 1,2,EAST\nMOVE\nMOVE\nLEFT\nMOVE\nREPORT\n"
    assert run_script(script) == "At [3, 3], facing NORTH"


def test_commands_before_place_are_refused(processor):
    for line in ("move", "left", "right", "report"):
        assert processor.process_line(line) == "Must start with a valid Place command"
    assert processor.process_line("place") == ""


def test_unknown_direction_on_place(processor):
    assert processor.process_line("place 1 1 up") == "Invalid"
    assert processor.process_line("report") == "Must start with a valid Place command"


def test_falling_off_the_edge(processor):
    processor.process_line("place 4 4 north")
    assert processor.process_line("move") == "Invalid"
    assert processor.process_line("report") == "At [4, 4], facing NORTH"


def test_walk_around_the_table_stays_valid(processor):
    processor.process_line("place")
    for _ in range(4):
        for _ in range(6):
            processor.process_line("move")
        processor.process_line("left")
        x, y = processor.robot.position
        assert x in table.OKAY_DIMENSION and y in table.OKAY_DIMENSION
        assert processor.robot.direction in table.DIRECTIONS
    assert processor.process_line("report") == "At [0, 0], facing EAST"


def test_feed_returns_every_response(processor):
    results = processor.feed("place 0 0 north\nmove\n\nfly\nreport")
    assert results == ["", "", "", "Invalid keyword", "At [0, 1], facing NORTH"]


@pytest.mark.parametrize(
    "line,expected",
    [
        ("a,b", ["a", "b"]),
        ("a b", ["a", "b"]),
        ("  PLACE 1, 2,NORTH  ", ["place", "1", "2", "north"]),
        ("place\t1 ,, 2", ["place", "1", "2"]),
        ("", []),
        ("   ", []),
    ],
)
def test_tokenizer(line, expected):
    assert CommandProcessor.tokenize(line) == expected


def test_startup_message(processor):
    message = processor.startup_message()
    assert "Welcome" in message
    assert "Place, Left, Right, Move & Report" in message


def test_contract_violations_propagate(processor, monkeypatch):
    processor.process_line("place")
    monkeypatch.setattr(Robot, "turn_left", lambda self: self.turn(3))
    with pytest.raises(RobotContractError):
        processor.process_line("left")


@pytest.mark.parametrize(
    "line,expected",
    [
        ("place " + "9" * 5000 + " 0", "Argument must not exceed 4"),
        ("place 0 " + "1" * 5000, "Argument must not exceed 4"),
        ("place " + "0" * 5000 + " 0", ""),
    ],
)
def test_very_long_coordinates_answer_with_messages(processor, line, expected):
    assert processor.process_line(line) == expected
