"""Configuration for a native gtest run."""

import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import Field

from gtest_wrapper.models.base import Model
from gtest_wrapper.models.platform import PlatformDescriptor

DEFAULT_LAUNCHER_NAME = "gtestLauncher"

# Dynamic linker search paths: LD_LIBRARY_PATH on Linux/Unix, LIBPATH on AIX.
DEFAULT_LIBRARY_PATH_VARIABLES: Sequence[str] = ("LD_LIBRARY_PATH", "LIBPATH")


class WrapperConfig(Model):
    """Everything needed to locate and launch the native test runner."""

    native_path: Path = Field(
        ..., description="Base directory of the native test artifacts"
    )
    jdk: str = Field(..., description="JDK under test, passed as -jdk")
    vm_name: str = Field(..., description="VM name, e.g. 'OpenJDK 64-Bit Server VM'")
    os_name: str = Field(default=sys.platform, description="Host OS name")
    launcher_name: str = Field(
        default=DEFAULT_LAUNCHER_NAME, description="Native executable base name"
    )
    library_path_variables: Sequence[str] = Field(
        default=DEFAULT_LIBRARY_PATH_VARIABLES,
        description="Library search variables to prefix when inherited",
    )
    expected_exit_code: int = Field(default=0, description="Passing exit code")

    def platform(self) -> PlatformDescriptor:
        """Return the platform descriptor for this run."""
        return PlatformDescriptor(vm_name=self.vm_name, os_name=self.os_name)
