"""
Pytest configuration and shared fixtures.

This module provides:
- Sample record fixtures shared by the array, text and data tests
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def people() -> list:
    """Return a list of person records keyed by name and age."""
    return [
        {"name": "Syn", "age": 20},
        {"name": "Jack", "age": 22},
        {"name": "Jane", "age": 21},
        {"name": "John", "age": 22},
        {"name": "Min", "age": 21},
    ]


@pytest.fixture
def nested() -> dict:
    """Return a nested structure mixing dicts, lists and objects."""
    class Profile:
        def __init__(self):
            self.city = "Lisbon"
            self.tags = ["admin", "ops"]

    return {
        "user": {
            "name": "Syn",
            "roles": [{"id": 1, "name": "owner"}, {"id": 2, "name": "editor"}],
            "profile": Profile(),
        },
        "count": 0,
    }


@pytest.fixture
def csv_text() -> str:
    """Return a small CSV document with a title row."""
    return "name,age,city\nSyn,20,Lisbon\nJane,21,Porto\n"
