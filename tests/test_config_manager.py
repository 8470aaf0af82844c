"""
Tests for ConfigManager (include system, fallback to factory defaults)
"""

from pathlib import Path

import yaml

import config as bundled_config
from managers import ConfigManager
from managers.config_manager import SRC_DIR
from models.config import AppConfig
from models.enums import LayoutType, LogLevel, VisualizationType


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_repository_config_loads():
    manager = ConfigManager()
    config = manager.load()

    assert manager.used_defaults is False
    assert config.sequencer.default_numbers == [64, 34, 25, 12, 22, 11, 90]
    assert config.sequencer.default_speed_ms == 1000
    assert config.visualization.colors.comparing == "#fbbf24"
    assert config.interpreter.clarification_threshold == 0.3
    assert config.api.port == 8000
    assert "http://localhost:3000" in config.api.cors_origins


def test_includes_are_merged_and_main_file_wins(tmp_path):
    _write(tmp_path / "config" / "config.yaml", {
        "include": ["sequencer.yaml", "visualization.yaml"],
        "sequencer": {"default_speed_ms": 250},
        "logging": {"level": "DEBUG"},
    })
    _write(tmp_path / "config" / "sequencer.yaml", {
        "sequencer": {"default_numbers": [3, 1, 2], "default_speed_ms": 750},
    })
    _write(tmp_path / "config" / "visualization.yaml", {
        "visualization": {"visualization_type": "bars", "layout": "grid"},
    })

    manager = ConfigManager(base_dir=tmp_path)
    config = manager.load()

    assert manager.used_defaults is False
    # Top-level sections are replaced, not deep-merged
    assert config.sequencer.default_speed_ms == 250
    assert config.sequencer.default_numbers == AppConfig().sequencer.default_numbers
    assert config.visualization.visualization_type == VisualizationType.BARS
    assert config.visualization.layout == LayoutType.GRID
    assert config.logging.level == LogLevel.DEBUG


def test_monolithic_config(tmp_path):
    _write(tmp_path / "config" / "config.yaml", {
        "sequencer": {"default_numbers": [9, 8]},
        "unknown_section": {"ignored": True},
    })

    config = ConfigManager(base_dir=tmp_path).load()

    assert config.sequencer.default_numbers == [9, 8]
    assert config.sequencer.max_input_length == 64


def test_missing_config_falls_back_to_factory_defaults(tmp_path):
    _write(tmp_path / "config" / "factory_defaults.yaml", {
        "sequencer": {"default_numbers": [1, 2, 3]},
    })

    manager = ConfigManager(base_dir=tmp_path)
    config = manager.load()

    assert manager.used_defaults is True
    assert config.sequencer.default_numbers == [1, 2, 3]


def test_missing_include_falls_back(tmp_path):
    _write(tmp_path / "config" / "config.yaml", {"include": ["nope.yaml"]})

    manager = ConfigManager(base_dir=tmp_path)
    config = manager.load()

    assert manager.used_defaults is True
    assert config == AppConfig()


def test_invalid_enum_falls_back(tmp_path):
    _write(tmp_path / "config" / "config.yaml", {
        "visualization": {"visualization_type": "hexagons"},
    })

    manager = ConfigManager(base_dir=tmp_path)
    config = manager.load()

    assert manager.used_defaults is True
    assert config.visualization.visualization_type == VisualizationType.COLUMNS


def test_non_mapping_falls_back(tmp_path):
    path = tmp_path / "config" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_text("- just\n- a list\n", encoding="utf-8")

    manager = ConfigManager(base_dir=tmp_path)
    manager.load()

    assert manager.used_defaults is True


def test_broken_yaml_falls_back(tmp_path):
    path = tmp_path / "config" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_text("sequencer: [unclosed\n", encoding="utf-8")

    manager = ConfigManager(base_dir=tmp_path)
    config = manager.load()

    assert manager.used_defaults is True
    assert config.sequencer.default_speed_ms == 1000


def test_yaml_files_live_in_the_config_package():
    # Installed layout: the config package sits next to managers/
    config_dir = Path(bundled_config.__file__).resolve().parent

    assert config_dir == (SRC_DIR / "config").resolve()
    assert {p.name for p in config_dir.glob("*.yaml")} == {
        "config.yaml", "sequencer.yaml", "visualization.yaml", "api.yaml", "factory_defaults.yaml",
    }
