"""
Models package - Data models for the sorting visualizer
"""

from .enums import (
    CommandAction, VisualizationType, LayoutType, FeatureTag,
    StepKind, PlaybackState, ChatRole, LogLevel, LogCategory,
)
from .command import (
    ParsedCommand, VisualizationParams, NumbersParams, SpeedParams,
    LayoutParams, FeatureParams, NoParams,
)
from .animation_step import AnimationStep

__all__ = [
    'CommandAction',
    'VisualizationType',
    'LayoutType',
    'FeatureTag',
    'StepKind',
    'PlaybackState',
    'ChatRole',
    'LogLevel',
    'LogCategory',
    'ParsedCommand',
    'VisualizationParams',
    'NumbersParams',
    'SpeedParams',
    'LayoutParams',
    'FeatureParams',
    'NoParams',
    'AnimationStep',
]
