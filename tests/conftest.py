"""
Shared fixtures for the config-complete test suite.

Author: config-complete Project
License: MIT
"""

import json
import pytest
from pathlib import Path

FILES_DIRECTORY = Path(__file__).parent / "configuration-files"


@pytest.fixture
def files_dir() -> Path:
    """Directory holding the static test documents."""
    return FILES_DIRECTORY


@pytest.fixture
def presets_dir(files_dir) -> str:
    return str(files_dir / "presets")


@pytest.fixture
def customs_dir(files_dir) -> str:
    return str(files_dir / "customs")


@pytest.fixture
def description_file(files_dir) -> str:
    return str(files_dir / "description.json")


@pytest.fixture
def read_json():
    """Read a JSON document the way a caller would expect it."""
    def _read(path):
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    return _read
