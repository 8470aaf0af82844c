"""
Parsed command models

A ParsedCommand is the structured result of interpreting one chat message.
Parameters are a tagged union: every action has its own parameter class that
carries only the fields relevant to it, so a speed command can never hold a
layout.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from models.enums import CommandAction, VisualizationType, LayoutType, FeatureTag


@dataclass(frozen=True)
class VisualizationParams:
    """Parameters for CHANGE_VISUALIZATION"""
    visualization_type: Optional[VisualizationType] = None
    height_representation: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.visualization_type is not None:
            data["visualizationType"] = self.visualization_type.value
        if self.height_representation is not None:
            data["heightRepresentation"] = self.height_representation
        return data


@dataclass(frozen=True)
class NumbersParams:
    """Parameters for CHANGE_NUMBERS"""
    numbers: Tuple[int, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"numbers": list(self.numbers)}


@dataclass(frozen=True)
class SpeedParams:
    """Parameters for CHANGE_SPEED (speed_ms is absent when no value was recognised)"""
    speed_ms: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {} if self.speed_ms is None else {"speedMs": self.speed_ms}


@dataclass(frozen=True)
class LayoutParams:
    """Parameters for CHANGE_LAYOUT"""
    layout: Optional[LayoutType] = None

    def to_dict(self) -> Dict[str, Any]:
        return {} if self.layout is None else {"layout": self.layout.value}


@dataclass(frozen=True)
class FeatureParams:
    """Parameters for ADD_FEATURE"""
    feature: Optional[FeatureTag] = None

    def to_dict(self) -> Dict[str, Any]:
        return {} if self.feature is None else {"feature": self.feature.value}


@dataclass(frozen=True)
class NoParams:
    """Parameters for UNKNOWN"""

    def to_dict(self) -> Dict[str, Any]:
        return {}


CommandParams = Union[VisualizationParams, NumbersParams, SpeedParams, LayoutParams, FeatureParams, NoParams]

# Which parameter class belongs to which action
PARAMS_BY_ACTION = {
    CommandAction.CHANGE_VISUALIZATION: VisualizationParams,
    CommandAction.CHANGE_NUMBERS: NumbersParams,
    CommandAction.CHANGE_SPEED: SpeedParams,
    CommandAction.CHANGE_LAYOUT: LayoutParams,
    CommandAction.ADD_FEATURE: FeatureParams,
    CommandAction.UNKNOWN: NoParams,
}


@dataclass(frozen=True)
class ParsedCommand:
    """
    Structured, confidence-scored command

    Attributes:
        action: Best-guess action (last matching rule wins)
        parameters: Action-specific parameter variant
        confidence: Additive heuristic score, not a probability (may exceed 1.0)
        original_text: Input text exactly as received
    """
    action: CommandAction
    parameters: CommandParams = field(default_factory=NoParams)
    confidence: float = 0.0
    original_text: str = ""

    def __post_init__(self):
        expected = PARAMS_BY_ACTION[self.action]
        if not isinstance(self.parameters, expected):
            raise TypeError(
                f"{self.action.name} expects {expected.__name__}, "
                f"got {type(self.parameters).__name__}"
            )

    @classmethod
    def unknown(cls, text: str = "") -> "ParsedCommand":
        """Empty result: UNKNOWN action, zero confidence, no parameters"""
        return cls(action=CommandAction.UNKNOWN, parameters=NoParams(), confidence=0.0, original_text=text)

    @property
    def is_unknown(self) -> bool:
        return self.action == CommandAction.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Sparse wire representation (only populated parameter fields)"""
        return {
            "action": self.action.value,
            "parameters": self.parameters.to_dict(),
            "confidence": self.confidence,
            "originalText": self.original_text,
        }
