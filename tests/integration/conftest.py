"""Fixtures for integration tests."""

import stat
from pathlib import Path
from typing import Protocol

import pytest


class WriteLauncherFn(Protocol):
    """Protocol for launcher script creation function."""

    def __call__(self, directory: Path, body: str) -> Path:
        """Write an executable gtestLauncher script and return its path."""


@pytest.fixture
def test_image(tmp_path: Path) -> Path:
    """Create <image>/hotspot/jtreg/native and <image>/hotspot/gtest."""
    (tmp_path / "hotspot" / "jtreg" / "native").mkdir(parents=True)
    (tmp_path / "hotspot" / "gtest").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def write_launcher() -> WriteLauncherFn:
    """Return a function that writes a fake gtestLauncher."""

    def _write(directory: Path, body: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        launcher = directory / "gtestLauncher"
        launcher.write_text(f"#!/bin/sh\n{body}\n")
        launcher.chmod(launcher.stat().st_mode | stat.S_IXUSR)
        return launcher

    return _write
