import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.config import AppConfig
from services.service_container import ServiceContainer


@pytest.fixture
def app_config():
    """Built-in defaults, independent of the YAML files on disk"""
    return AppConfig()


@pytest.fixture
def services(app_config):
    return ServiceContainer.build(app_config)
