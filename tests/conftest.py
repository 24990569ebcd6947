"""Pytest fixtures for mean_lint tests."""

from __future__ import annotations

import argparse
import copy

import pytest

from mean_lint._laws import DEFAULTS


@pytest.fixture
def args() -> argparse.Namespace:
    """Options as main() would leave them with no config and no flags."""
    return argparse.Namespace(**copy.deepcopy(DEFAULTS), jobs=1, lines=False)
