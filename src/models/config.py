"""
Configuration models

Typed view of the YAML configuration (config.yaml + included files).
Built by ConfigManager; every section has defaults so a partial file is valid.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.enums import VisualizationType, LayoutType, LogLevel
from utils.enum_helper import EnumHelper


DEFAULT_NUMBERS = [64, 34, 25, 12, 22, 11, 90]


@dataclass(frozen=True)
class SequencerConfig:
    """Step generation defaults and limits"""
    default_numbers: List[int] = field(default_factory=lambda: list(DEFAULT_NUMBERS))
    default_speed_ms: int = 1000
    min_speed_ms: int = 50
    max_speed_ms: int = 10000
    max_input_length: int = 64


@dataclass(frozen=True)
class StepColors:
    """Highlight colours per step kind (hex strings)"""
    default: str = "#ffffff"
    comparing: str = "#fbbf24"
    swapping: str = "#ef4444"
    sorted: str = "#10b981"


@dataclass(frozen=True)
class VisualizationDefaults:
    """Initial look of a new visualization session"""
    visualization_type: VisualizationType = VisualizationType.COLUMNS
    layout: LayoutType = LayoutType.HORIZONTAL
    show_timeline: bool = True
    show_description: bool = True
    colors: StepColors = field(default_factory=StepColors)


@dataclass(frozen=True)
class ControlsConfig:
    """Which playback controls the canvas exposes"""
    play: bool = True
    pause: bool = True
    reset: bool = True
    step_forward: bool = True
    step_backward: bool = True
    speed_control: bool = True


@dataclass(frozen=True)
class InterpreterConfig:
    """Command interpreter settings"""
    clarification_threshold: float = 0.3
    history_limit: int = 100


@dataclass(frozen=True)
class ApiConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    docs_enabled: bool = True
    cors_origins: Optional[List[str]] = None


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    use_colors: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration"""
    sequencer: SequencerConfig = field(default_factory=SequencerConfig)
    visualization: VisualizationDefaults = field(default_factory=VisualizationDefaults)
    controls: ControlsConfig = field(default_factory=ControlsConfig)
    interpreter: InterpreterConfig = field(default_factory=InterpreterConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """
        Build AppConfig from merged YAML data

        Unknown keys are ignored, missing sections fall back to defaults.

        Raises:
            ValueError: Enum value in YAML is not recognised
        """
        data = data or {}

        seq = data.get("sequencer", {}) or {}
        vis = dict(data.get("visualization", {}) or {})
        colors = vis.pop("colors", {}) or {}
        controls = data.get("controls", {}) or {}
        interp = data.get("interpreter", {}) or {}
        api = data.get("api", {}) or {}
        logging_cfg = data.get("logging", {}) or {}

        visualization = VisualizationDefaults(
            visualization_type=EnumHelper.to_enum(
                VisualizationType, vis.get("visualization_type", VisualizationType.COLUMNS)
            ),
            layout=EnumHelper.to_enum(LayoutType, vis.get("layout", LayoutType.HORIZONTAL)),
            show_timeline=bool(vis.get("show_timeline", True)),
            show_description=bool(vis.get("show_description", True)),
            colors=StepColors(**_known(StepColors, colors)),
        )

        logging_section = LoggingConfig(
            level=EnumHelper.to_enum(LogLevel, logging_cfg.get("level", LogLevel.INFO)),
            use_colors=bool(logging_cfg.get("use_colors", True)),
        )

        return cls(
            sequencer=SequencerConfig(**_known(SequencerConfig, seq)),
            visualization=visualization,
            controls=ControlsConfig(**_known(ControlsConfig, controls)),
            interpreter=InterpreterConfig(**_known(InterpreterConfig, interp)),
            api=ApiConfig(**_known(ApiConfig, api)),
            logging=logging_section,
        )


def _known(dataclass_type, values: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only keys that are fields of dataclass_type"""
    names = dataclass_type.__dataclass_fields__.keys()
    return {k: v for k, v in values.items() if k in names}
