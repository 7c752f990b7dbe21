"""
Pytest configuration and fixtures for tf2-schema tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing tf2_schema
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from tf2_schema import ItemSchema  # noqa: E402

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def schema_path() -> Path:
    return FIXTURES / "schema_sample.json"


@pytest.fixture
def schema(schema_path) -> ItemSchema:
    return ItemSchema.load(schema_path)
