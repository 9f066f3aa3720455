"""Pytest configuration for npdio test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    src_path = Path(__file__).resolve().parent.parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def restore_log_level() -> Iterator[None]:
    """Reset structlog to the default level after each test."""
    yield
    from core.logging_config import configure_logging

    configure_logging()
