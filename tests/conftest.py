"""
Pytest configuration and shared fixtures for the counting sort tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Modules live flat in src/python; the plotting script lives in scripts/
root = Path(__file__).parent.parent
sys.path.insert(0, str(root / "src" / "python"))
sys.path.insert(0, str(root / "scripts"))


class Tagged(int):
    """An int that remembers where it came from, for stability checks."""

    def __new__(cls, value, tag):
        obj = super().__new__(cls, value)
        obj.tag = tag
        return obj


@pytest.fixture
def tagged():
    return Tagged


@pytest.fixture
def rng():
    return random.Random(7648730752)
