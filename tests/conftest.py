from __future__ import annotations

import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure() -> None:
    """
    Keep a `src/` layout while allowing `pytest` to run without requiring an editable install.
    """

    src_path = PROJECT_ROOT / "src"
    sys.path.insert(0, str(src_path))


@pytest.fixture
def default_config_path() -> Path:
    return PROJECT_ROOT / "config" / "default.json"


@pytest.fixture
def demo_registry():
    from transithub.config.models import AppConfig
    from transithub.demo.repository import DemoRepository

    return DemoRepository(AppConfig()).build_registry()
