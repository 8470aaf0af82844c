"""Visualization session - chat commands applied to a sorting animation"""

import uuid
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Set

from animations.bubble_sort import StepSequencer
from controllers.playback_controller import PlaybackController
from interpreter.command_interpreter import CommandInterpreter
from models.animation_step import AnimationStep
from models.command import ParsedCommand
from models.config import AppConfig
from models.enums import (
    ChatRole, CommandAction, FeatureTag, LayoutType, LogCategory, StepKind, VisualizationType,
)
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SESSION)


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class ChatReply:
    """Outcome of one chat message"""
    command: ParsedCommand
    response: str
    applied: bool


class VisualizationSession:
    """
    One sorting canvas plus its chat panel

    Owns the input numbers, speed and display options, the generated steps
    and the playback controller. Steps are regenerated whenever the numbers
    or the speed change; the controller is reloaded with the new sequence.

    Usage:
        session = VisualizationSession()
        reply = session.handle_message("use numbers 5, 3, 8")
        reply.applied            # True
        session.numbers          # [5, 3, 8]
        session.controller.play()
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        interpreter: Optional[CommandInterpreter] = None,
        session_id: Optional[str] = None
    ):
        cfg = config or AppConfig()
        self.id = session_id or uuid.uuid4().hex
        self.sequencer_config = cfg.sequencer
        self.colors = cfg.visualization.colors
        self.show_timeline = cfg.visualization.show_timeline
        self.show_description = cfg.visualization.show_description
        self.controls = cfg.controls
        self.interpreter = interpreter or CommandInterpreter(cfg.interpreter.clarification_threshold)

        self.numbers: List[int] = list(cfg.sequencer.default_numbers)
        self.speed_ms: int = cfg.sequencer.default_speed_ms
        self.visualization_type: VisualizationType = cfg.visualization.visualization_type
        self.height_representation: bool = False
        self.layout: LayoutType = cfg.visualization.layout
        self.features: Set[FeatureTag] = set()

        self.history: deque = deque(maxlen=cfg.interpreter.history_limit)
        self.controller = PlaybackController()
        self.steps: List[AnimationStep] = []
        self._regenerate()

        log.info(f"Session created: {self.id}", numbers=self.numbers, speed_ms=self.speed_ms)

    @property
    def threshold(self) -> float:
        return self.interpreter.clarification_threshold

    # ------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------

    def _regenerate(self) -> None:
        self.steps = StepSequencer.generate(self.numbers, self.speed_ms)
        self.controller.load(self.steps)

    def set_numbers(self, values: List[int]) -> None:
        """
        Replace the input array and regenerate steps.

        Raises:
            ValueError: more values than max_input_length
        """
        values = [int(v) for v in values]
        limit = self.sequencer_config.max_input_length
        if len(values) > limit:
            raise ValueError(f"At most {limit} numbers are supported, got {len(values)}")
        self.numbers = values
        self._regenerate()
        log.info("Numbers updated", numbers=values, steps=len(self.steps))

    def set_speed(self, speed_ms: int) -> int:
        """
        Set per-step speed (clamped to configured limits) and regenerate steps.

        Returns:
            Speed actually applied
        """
        low = self.sequencer_config.min_speed_ms
        high = self.sequencer_config.max_speed_ms
        applied = min(max(int(speed_ms), low), high)
        if applied != speed_ms:
            log.warn(f"Speed {speed_ms}ms clamped to {applied}ms", min=low, max=high)
        self.speed_ms = applied
        self._regenerate()
        log.info("Speed updated", speed_ms=applied)
        return applied

    # ------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------

    def apply_command(self, command: ParsedCommand) -> bool:
        """
        Apply a parsed command to the session.

        Commands below the clarification threshold are ignored.

        Returns:
            True if the session changed
        """
        if command.confidence < self.threshold:
            log.debug("Command ignored (low confidence)", confidence=command.confidence)
            return False

        params = command.parameters
        action = command.action

        if action == CommandAction.CHANGE_NUMBERS:
            if not params.numbers:
                return False
            try:
                self.set_numbers(list(params.numbers))
            except ValueError as ex:
                log.warn("Numbers rejected", reason=str(ex))
                return False
            return True

        if action == CommandAction.CHANGE_SPEED:
            if not params.speed_ms:
                return False
            self.set_speed(params.speed_ms)
            return True

        if action == CommandAction.CHANGE_VISUALIZATION:
            changed = False
            if params.visualization_type is not None:
                self.visualization_type = params.visualization_type
                changed = True
            if params.height_representation is not None:
                self.height_representation = params.height_representation
                changed = True
            if changed:
                log.info(
                    "Visualization updated",
                    type=self.visualization_type.value,
                    height=self.height_representation,
                )
            return changed

        if action == CommandAction.CHANGE_LAYOUT:
            if params.layout is None:
                return False
            self.layout = params.layout
            log.info("Layout updated", layout=self.layout.value)
            return True

        if action == CommandAction.ADD_FEATURE:
            if params.feature is None:
                return False
            self.features.add(params.feature)
            log.info("Feature enabled", feature=params.feature.value)
            return True

        return False

    def handle_message(self, text: str) -> ChatReply:
        """Parse, answer and apply one chat message"""
        self.history.append(ChatMessage(ChatRole.USER, text or ""))

        command = self.interpreter.parse(text)
        response = self.interpreter.describe(command)
        applied = self.apply_command(command)

        self.history.append(ChatMessage(ChatRole.ASSISTANT, response))
        log.debug(
            f"Chat reply: {command.action.value}",
            confidence=command.confidence,
            applied=applied,
        )
        return ChatReply(command=command, response=response, applied=applied)

    # ------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------

    def step_colors_for(self, step: Optional[AnimationStep]) -> List[str]:
        """Highlight colour for every array position at this step"""
        if step is None:
            return [self.colors.default] * len(self.numbers)

        if step.kind == StepKind.COMPLETE:
            return [self.colors.sorted] * len(step.array)

        highlight = self.colors.comparing if step.kind == StepKind.COMPARE else self.colors.swapping
        return [
            highlight if i in step.indices else self.colors.default
            for i in range(len(step.array))
        ]

    def to_dict(self) -> Dict[str, Any]:
        current = self.controller.current_step
        return {
            "id": self.id,
            "numbers": list(self.numbers),
            "speed_ms": self.speed_ms,
            "visualization_type": self.visualization_type.value,
            "height_representation": self.height_representation,
            "layout": self.layout.value,
            "features": sorted(f.value for f in self.features),
            "summary": StepSequencer.summary(self.steps),
            "playback": self.controller.snapshot(),
            "colors": self.step_colors_for(current),
            "display": {
                "show_timeline": self.show_timeline,
                "show_description": self.show_description,
                "controls": asdict(self.controls),
            },
            "history": [m.to_dict() for m in self.history],
        }
