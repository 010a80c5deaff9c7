"""Locate the directory holding the native test executable."""

import logging
from pathlib import Path

from gtest_wrapper.errors import NativeLibraryNotFoundError
from gtest_wrapper.variant import VmVariant

log = logging.getLogger(__name__)

GTEST_DIR_NAME = "gtest"


def locate_native_dir(native_path: Path, variant: VmVariant) -> Path:
    """Find the variant directory containing the native test runner.

    The test image installs gtestLauncher in ``<image>/hotspot/gtest/<variant>``.
    ``native_path`` points either to ``<image>/hotspot/gtest`` or to
    ``<image>/hotspot/jtreg/native``, so the primary candidate is tried first
    and the sibling ``gtest`` directory second.

    Args:
        native_path: Base directory of the native test artifacts
        variant: VM variant subdirectory name

    Returns:
        The first candidate directory that exists

    Raises:
        NativeLibraryNotFoundError: If neither candidate exists

    """
    primary = native_path / variant
    log.debug("Probing native directory %s", primary)
    if primary.exists():
        return primary

    fallback = native_path.parent.parent / GTEST_DIR_NAME / variant
    log.debug("Probing native directory %s", fallback)
    if fallback.exists():
        return fallback

    raise NativeLibraryNotFoundError(
        f"TESTBUG: the library has not been found in {native_path}"
    )
