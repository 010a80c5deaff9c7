"""Compose the environment for the native test process."""

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from gtest_wrapper.models.config import DEFAULT_LIBRARY_PATH_VARIABLES


def compose_environment(
    native_dir: Path,
    inherited: Mapping[str, str],
    variables: Sequence[str] = DEFAULT_LIBRARY_PATH_VARIABLES,
    separator: str = os.pathsep,
) -> dict[str, str]:
    """Build the child environment with ``native_dir`` on the library path.

    The harness may already point a library search variable at the JDK's
    libjvm. In that case the native directory is prepended so the test's own
    libjvm wins. Variables that are not inherited stay unset.

    Args:
        native_dir: Directory holding the native test runner and its libraries
        inherited: Environment of the current process
        variables: Library search variable names to update
        separator: Path list separator

    Returns:
        A new environment mapping; ``inherited`` is not modified

    """
    env = dict(inherited)
    for name in variables:
        if (current := inherited.get(name)) is not None:
            env[name] = f"{native_dir}{separator}{current}"
    return env
