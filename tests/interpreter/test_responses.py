"""
Tests for the assistant confirmation sentences
"""

import pytest

from interpreter import CommandInterpreter, parse_command
from interpreter.responses import (
    describe_command, CLARIFICATION_MESSAGE, GENERIC_MESSAGE, FEATURE_MESSAGES,
)
from models.command import ParsedCommand, SpeedParams
from models.enums import CommandAction, FeatureTag


def test_low_confidence_asks_for_clarification():
    cmd = ParsedCommand(
        action=CommandAction.CHANGE_SPEED,
        parameters=SpeedParams(speed_ms=500),
        confidence=0.25,
        original_text="x",
    )
    assert describe_command(cmd) == CLARIFICATION_MESSAGE


def test_unknown_asks_for_clarification():
    assert describe_command(parse_command("hello there")) == CLARIFICATION_MESSAGE


def test_vague_request_asks_for_clarification():
    assert describe_command(parse_command("please change it")) == CLARIFICATION_MESSAGE


def test_faster_speed():
    assert describe_command(parse_command("make it faster")) == (
        "I'll adjust the animation speed to 500ms for faster visualization."
    )


def test_slower_speed():
    assert describe_command(parse_command("slow down")) == (
        "I'll adjust the animation speed to 2000ms for slower visualization."
    )


def test_exact_one_second_reads_slower():
    text = describe_command(parse_command("speed 1 second"))
    assert text == "I'll adjust the animation speed to 1000ms for slower visualization."


def test_speed_without_value_is_generic():
    assert describe_command(parse_command("change speed")) == GENERIC_MESSAGE


def test_numbers_message():
    assert describe_command(parse_command("use numbers 5, 3, 8")) == (
        "I'll update the numbers to: 5, 3, 8. This will give us a fresh set of data to sort!"
    )


def test_layout_message():
    assert describe_command(parse_command("change layout to grid")) == (
        "I'll change the layout to grid arrangement for better visualization."
    )


@pytest.mark.parametrize("text, expected", [
    ("columns please", "I'll switch the visualization to use columns instead of the current format."),
    ("use bars", "I'll change the visualization to use bars for better visual representation."),
])
def test_visualization_messages(text, expected):
    assert describe_command(parse_command(text)) == expected


def test_buttons_with_height_message():
    cmd = parse_command("show buttons as columns whose height represents the numbers")
    assert describe_command(cmd).startswith(
        "I'll change the visualization to show buttons as columns where the height represents the numbers."
    )


def test_buttons_without_height_is_generic():
    assert describe_command(parse_command("try buttons")) == GENERIC_MESSAGE


@pytest.mark.parametrize("text, feature", [
    ("add color coding", FeatureTag.COLOR_CODING),
    ("add sound effects", FeatureTag.SOUND_EFFECTS),
    ("include step explanations", FeatureTag.STEP_EXPLANATION),
])
def test_feature_messages(text, feature):
    assert describe_command(parse_command(text)) == FEATURE_MESSAGES[feature]


def test_interpreter_uses_its_own_threshold():
    strict = CommandInterpreter(clarification_threshold=0.6)
    cmd = strict.parse("make it faster")

    assert cmd.confidence == 0.5
    assert strict.describe(cmd) == CLARIFICATION_MESSAGE
    assert CommandInterpreter().describe(cmd) != CLARIFICATION_MESSAGE
