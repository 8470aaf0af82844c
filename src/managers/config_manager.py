"""
Config Manager

Loads config.yaml with include system support and builds the typed AppConfig.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional

from models.config import AppConfig
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes the include: directive to load modular
    YAML files. Falls back to factory defaults when the main config cannot
    be read or parsed.

    Example:
        config = ConfigManager()
        app_config = config.load()

        app_config.sequencer.default_speed_ms   # 1000
        app_config.visualization.colors.comparing  # "#fbbf24"
    """

    def __init__(
        self,
        config_path: str = "config/config.yaml",
        defaults_path: str = "config/factory_defaults.yaml",
        base_dir: Optional[Path] = None
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to base_dir)
            defaults_path: Path to factory defaults fallback
            base_dir: Directory paths are resolved against (default: src/)
        """
        self.base_dir = Path(base_dir) if base_dir else SRC_DIR
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: AppConfig = AppConfig()
        self.used_defaults = False

    def load(self) -> AppConfig:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory defaults on failure

        Returns:
            AppConfig built from the merged data
        """
        self.used_defaults = False
        try:
            full_path = self.base_dir / self.config_path
            main_config = self._read_yaml(full_path)

            if 'include' in main_config:
                log.info("Using include-based configuration")
                includes = main_config.pop('include') or []
                merged = self._load_with_includes(includes, full_path.parent)
                merged.update(main_config)
                self.data = merged
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

            self.config = AppConfig.from_dict(self.data)

        except (OSError, yaml.YAMLError, ValueError, TypeError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            self.used_defaults = True

            defaults_path = self.base_dir / self.factory_defaults_path
            if defaults_path.exists():
                self.data = self._read_yaml(defaults_path)
            else:
                log.warn("Factory defaults not found, using built-in defaults", path=str(defaults_path))
                self.data = {}
            self.config = AppConfig.from_dict(self.data)

        log.info(
            "Configuration loaded",
            speed_ms=self.config.sequencer.default_speed_ms,
            numbers=self.config.sequencer.default_numbers,
        )
        return self.config

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path.name}: top level must be a mapping")
        return data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["sequencer.yaml", "api.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                file_data = self._read_yaml(filepath)
                if file_data:
                    merged.update(file_data)
                    log.debug(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        log.debug("Config merge complete", total_keys=len(merged))
        return merged
