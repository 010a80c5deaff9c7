"""Tests for native directory lookup."""

import logging
from pathlib import Path

import pytest

from gtest_wrapper.errors import NativeLibraryNotFoundError
from gtest_wrapper.locator import locate_native_dir


@pytest.fixture
def native_path(tmp_path: Path) -> Path:
    """Create <image>/hotspot/jtreg/native."""
    path = tmp_path / "hotspot" / "jtreg" / "native"
    path.mkdir(parents=True)
    return path


def test_returns_primary_directory(native_path: Path) -> None:
    """Returns <native>/<variant> when it exists."""
    (native_path / "server").mkdir()

    assert locate_native_dir(native_path, "server") == native_path / "server"


def test_prefers_primary_over_fallback(native_path: Path) -> None:
    """Primary layout wins even when the fallback also exists."""
    (native_path / "server").mkdir()
    fallback = native_path.parent.parent / "gtest" / "server"
    fallback.mkdir(parents=True)

    assert locate_native_dir(native_path, "server") == native_path / "server"


def test_falls_back_to_gtest_sibling(native_path: Path, tmp_path: Path) -> None:
    """Uses <native>/../../gtest/<variant> when primary is missing."""
    fallback = tmp_path / "hotspot" / "gtest" / "client"
    fallback.mkdir(parents=True)

    assert locate_native_dir(native_path, "client") == fallback


def test_fallback_ignores_other_variants(native_path: Path, tmp_path: Path) -> None:
    """Does not pick a directory built for a different variant."""
    (native_path / "client").mkdir()
    (tmp_path / "hotspot" / "gtest" / "zero").mkdir(parents=True)

    with pytest.raises(NativeLibraryNotFoundError):
        locate_native_dir(native_path, "server")


def test_raises_when_neither_exists(native_path: Path) -> None:
    """Raises naming the original native path."""
    with pytest.raises(NativeLibraryNotFoundError) as exc_info:
        locate_native_dir(native_path, "minimal")

    assert str(exc_info.value) == (
        f"TESTBUG: the library has not been found in {native_path}"
    )


def test_only_checks_directory_existence(native_path: Path) -> None:
    """Does not require the launcher executable to exist."""
    (native_path / "server").mkdir()

    result = locate_native_dir(native_path, "server")

    assert not (result / "gtestLauncher").exists()


def test_logs_probed_candidates(
    native_path: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Logs both candidates at debug level."""
    (tmp_path / "hotspot" / "gtest" / "server").mkdir(parents=True)

    with caplog.at_level(logging.DEBUG, logger="gtest_wrapper.locator"):
        locate_native_dir(native_path, "server")

    assert str(native_path / "server") in caplog.text
    assert str(tmp_path / "hotspot" / "gtest" / "server") in caplog.text
