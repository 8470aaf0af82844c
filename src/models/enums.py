"""
Enums for the sorting visualizer core
"""

from enum import Enum, auto


class CommandAction(Enum):
    """
    Action selected by the command interpreter

    Exactly one action is active per parsed command. The value is the
    wire tag used by the chat panel and the REST API.
    """
    CHANGE_VISUALIZATION = "change_visualization"
    CHANGE_NUMBERS = "change_numbers"
    CHANGE_SPEED = "change_speed"
    CHANGE_LAYOUT = "change_layout"
    ADD_FEATURE = "add_feature"
    UNKNOWN = "unknown"


class VisualizationType(Enum):
    """How array items are drawn on the canvas"""
    COLUMNS = "columns"
    BARS = "bars"
    CIRCLES = "circles"
    BUTTONS = "buttons"


class LayoutType(Enum):
    """Arrangement of array items"""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    GRID = "grid"


class FeatureTag(Enum):
    """Optional visualization features that can be switched on from chat"""
    COLOR_CODING = "color_coding"
    SOUND_EFFECTS = "sound_effects"
    STEP_EXPLANATION = "step_explanation"


class StepKind(Enum):
    """Kinds of steps in a sorting trace"""
    COMPARE = "compare"
    SWAP = "swap"
    COMPLETE = "complete"


class PlaybackState(Enum):
    """
    Playback state machine states

    IDLE: Sequence loaded, never played
    PLAYING: Advancing on every tick
    PAUSED: Stopped by user, reset, or reaching the last step
    COMPLETE: Derived label for PAUSED at the last step
    """
    IDLE = auto()
    PLAYING = auto()
    PAUSED = auto()
    COMPLETE = auto()


class ChatRole(Enum):
    """Author of a chat message"""
    USER = "user"
    ASSISTANT = "assistant"


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()       # Configuration loading, validation
    INTERPRETER = auto()  # Free-text command parsing
    SEQUENCER = auto()    # Step generation
    PLAYBACK = auto()     # Playback state machine and runner
    SESSION = auto()      # Visualization sessions and chat
    API = auto()
    SYSTEM = auto()       # Startup, shutdown, errors

    GENERAL = auto()      # Default general category
