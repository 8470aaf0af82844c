"""
Command Interpreter

Turns a free-text chat message into a ParsedCommand using layered keyword
rules. Not a classifier: every rule is a case-insensitive substring check.

Rule evaluation:
- Rules run in a fixed order and are not mutually exclusive.
- The last rule whose condition holds decides the action.
- Confidence accumulates over every rule that fired.
- The compound "buttons as columns whose height represents" rule sets
  confidence to 0.8 instead of adding, and its result is final.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from models.command import (
    ParsedCommand, VisualizationParams, NumbersParams, SpeedParams,
    LayoutParams, FeatureParams, NoParams, CommandParams,
)
from models.enums import CommandAction, VisualizationType, LayoutType, FeatureTag, LogCategory
from interpreter.responses import describe_command
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.INTERPRETER)


# Rule keywords (checked as substrings of the lowercased text)
VISUALIZATION_KEYWORDS = [
    ("button", VisualizationType.BUTTONS),
    ("column", VisualizationType.COLUMNS),
    ("bar", VisualizationType.BARS),
]
HEIGHT_KEYWORDS = ["height", "tall", "size", "represented"]
OVERRIDE_KEYWORDS = ["button", "column", "height", "represent"]
NUMBER_KEYWORDS = ["number", "value", "data"]
SPEED_KEYWORDS = ["speed", "fast", "slow"]
LAYOUT_KEYWORDS = ["layout", "arrange", "position"]
LAYOUT_BRANCHES = [
    (["vertical", "up", "down"], LayoutType.VERTICAL),
    (["horizontal", "side", "left", "right"], LayoutType.HORIZONTAL),
    (["grid", "matrix"], LayoutType.GRID),
]
FEATURE_KEYWORDS = ["add", "include", "show"]
FEATURE_BRANCHES = [
    (["color", "highlight"], FeatureTag.COLOR_CODING),
    (["sound", "audio"], FeatureTag.SOUND_EFFECTS),
    (["step", "explanation"], FeatureTag.STEP_EXPLANATION),
]
FALLBACK_KEYWORDS = ["change", "modify", "update"]

# Scores
BASE_SCORE = 0.3
DETAIL_SCORE = 0.2
NUMBERS_SCORE = 0.4
FEATURE_BASE_SCORE = 0.2
OVERRIDE_CONFIDENCE = 0.8
FALLBACK_CONFIDENCE = 0.1

FAST_SPEED_MS = 500
SLOW_SPEED_MS = 2000

DIGITS_PATTERN = re.compile(r'\d+')
SPEED_PATTERN = re.compile(r'(\d+)\s*(ms|milliseconds?|seconds?)', re.IGNORECASE)


def _contains_any(text: str, keywords: List[str]) -> bool:
    return any(k in text for k in keywords)


def _digit_runs_to_ints(runs: List[str]) -> List[int]:
    """Convert digit runs in order, skipping runs past the int conversion limit"""
    values = []
    for run in runs:
        try:
            values.append(int(run))
        except ValueError:
            log.debug("Digit run too long, skipped", length=len(run))
    return values


@dataclass
class _Scratch:
    """Mutable accumulator for one parse pass"""
    action: CommandAction = CommandAction.UNKNOWN
    confidence: float = 0.0
    visualization_type: Optional[VisualizationType] = None
    height_representation: Optional[bool] = None
    numbers: Optional[List[int]] = None
    speed_ms: Optional[int] = None
    layout: Optional[LayoutType] = None
    feature: Optional[FeatureTag] = None

    def build_params(self) -> CommandParams:
        """Keep only the fields the final action declares"""
        if self.action == CommandAction.CHANGE_VISUALIZATION:
            return VisualizationParams(self.visualization_type, self.height_representation)
        if self.action == CommandAction.CHANGE_NUMBERS:
            return NumbersParams(tuple(self.numbers or ()))
        if self.action == CommandAction.CHANGE_SPEED:
            return SpeedParams(self.speed_ms)
        if self.action == CommandAction.CHANGE_LAYOUT:
            return LayoutParams(self.layout)
        if self.action == CommandAction.ADD_FEATURE:
            return FeatureParams(self.feature)
        return NoParams()

    def finish(self, text: str) -> ParsedCommand:
        return ParsedCommand(
            action=self.action,
            parameters=self.build_params(),
            # 0.3 + 0.2 + 0.2 -> 0.7, not 0.7000000000000001
            confidence=round(self.confidence, 10),
            original_text=text,
        )


class CommandInterpreter:
    """
    Keyword-heuristic command interpreter

    Stateless apart from the clarification threshold used by describe().

    Usage:
        interpreter = CommandInterpreter()
        cmd = interpreter.parse("make it faster")
        # -> CHANGE_SPEED, speed_ms=500, confidence=0.5
        interpreter.describe(cmd)
        # -> "I'll adjust the animation speed to 500ms for faster visualization."
    """

    def __init__(self, clarification_threshold: float = 0.3):
        self.clarification_threshold = clarification_threshold

    def parse(self, text) -> ParsedCommand:
        """
        Parse free text into a ParsedCommand.

        Never raises: None, empty, and whitespace-only input yield an
        UNKNOWN command with zero confidence.
        """
        if text is None:
            return ParsedCommand.unknown("")
        if not isinstance(text, str):
            text = str(text)
        if not text.strip():
            return ParsedCommand.unknown(text)

        lower = text.lower()
        s = _Scratch()

        # 1. Visualization type
        if _contains_any(lower, [k for k, _ in VISUALIZATION_KEYWORDS]):
            s.action = CommandAction.CHANGE_VISUALIZATION
            s.confidence += BASE_SCORE
            for keyword, vis_type in VISUALIZATION_KEYWORDS:
                if keyword in lower:
                    s.visualization_type = vis_type
                    s.confidence += DETAIL_SCORE
                    break
            if _contains_any(lower, HEIGHT_KEYWORDS):
                s.height_representation = True
                s.confidence += DETAIL_SCORE

        # 2. "buttons as columns whose height represents the numbers"
        if all(k in lower for k in OVERRIDE_KEYWORDS):
            s.action = CommandAction.CHANGE_VISUALIZATION
            s.visualization_type = VisualizationType.BUTTONS
            s.height_representation = True
            s.confidence = OVERRIDE_CONFIDENCE
            return self._done(s, text, rule="compound_override")

        # 3. Numbers (keyword alone is not enough, digits must be present)
        if _contains_any(lower, NUMBER_KEYWORDS):
            numbers = _digit_runs_to_ints(DIGITS_PATTERN.findall(text))
            if numbers:
                s.action = CommandAction.CHANGE_NUMBERS
                s.numbers = numbers
                s.confidence += NUMBERS_SCORE

        # 4. Speed
        if _contains_any(lower, SPEED_KEYWORDS):
            s.action = CommandAction.CHANGE_SPEED
            s.confidence += BASE_SCORE
            if "fast" in lower:
                s.speed_ms = FAST_SPEED_MS
                s.confidence += DETAIL_SCORE
            elif "slow" in lower:
                s.speed_ms = SLOW_SPEED_MS
                s.confidence += DETAIL_SCORE
            else:
                explicit = self._extract_speed(text)
                if explicit is not None:
                    s.speed_ms = explicit
                    s.confidence += DETAIL_SCORE

        # 5. Layout
        if _contains_any(lower, LAYOUT_KEYWORDS):
            s.action = CommandAction.CHANGE_LAYOUT
            s.confidence += BASE_SCORE
            for keywords, layout in LAYOUT_BRANCHES:
                if _contains_any(lower, keywords):
                    s.layout = layout
                    s.confidence += DETAIL_SCORE
                    break

        # 6. Features
        if _contains_any(lower, FEATURE_KEYWORDS):
            s.action = CommandAction.ADD_FEATURE
            s.confidence += FEATURE_BASE_SCORE
            for keywords, feature in FEATURE_BRANCHES:
                if _contains_any(lower, keywords):
                    s.feature = feature
                    s.confidence += DETAIL_SCORE
                    break

        # 7. Vague edit request
        if s.action == CommandAction.UNKNOWN and s.confidence == 0:
            if _contains_any(lower, FALLBACK_KEYWORDS):
                s.action = CommandAction.CHANGE_VISUALIZATION
                s.confidence = FALLBACK_CONFIDENCE

        return self._done(s, text)

    @staticmethod
    def _extract_speed(text: str) -> Optional[int]:
        """Explicit "<n> ms|milliseconds|seconds" value, in milliseconds"""
        match = SPEED_PATTERN.search(text)
        if not match:
            return None
        try:
            value = int(match.group(1))
        except ValueError:
            log.debug("Speed value too long, ignored", length=len(match.group(1)))
            return None
        unit = match.group(2).lower()
        if unit.startswith("second"):
            value *= 1000
        return value

    def _done(self, scratch: _Scratch, text: str, rule: Optional[str] = None) -> ParsedCommand:
        command = scratch.finish(text)
        extra = {"rule": rule} if rule else {}
        log.debug(f"Parsed command: {command.action.value}", confidence=command.confidence, **extra)
        return command

    def describe(self, command: ParsedCommand) -> str:
        """Human-readable confirmation for a parsed command"""
        return describe_command(command, threshold=self.clarification_threshold)


_default_interpreter = CommandInterpreter()


def parse_command(text) -> ParsedCommand:
    """Parse text with the default interpreter"""
    return _default_interpreter.parse(text)
