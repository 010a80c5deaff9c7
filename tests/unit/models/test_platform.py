"""Tests for the platform descriptor."""

import pytest
from pydantic import ValidationError

from gtest_wrapper.models.platform import PlatformDescriptor


@pytest.mark.parametrize(
    ("vm_name", "server", "client", "minimal", "zero"),
    [
        ("OpenJDK 64-Bit Server VM", True, False, False, False),
        ("Java HotSpot(TM) Client VM", False, True, False, False),
        ("OpenJDK 64-Bit Minimal VM", False, False, True, False),
        ("OpenJDK 64-Bit Zero VM", False, False, False, True),
        ("OpenJDK 64-Bit Server", False, False, False, False),
    ],
)
def test_variant_predicates(
    vm_name: str, server: bool, client: bool, minimal: bool, zero: bool
) -> None:
    """Derives exactly one predicate from the VM name suffix."""
    platform = PlatformDescriptor(vm_name=vm_name, os_name="linux")

    assert platform.is_server is server
    assert platform.is_client is client
    assert platform.is_minimal is minimal
    assert platform.is_zero is zero


@pytest.mark.parametrize(
    ("os_name", "is_windows", "suffix"),
    [
        ("linux", False, ""),
        ("aix", False, ""),
        ("darwin", False, ""),
        ("win32", True, ".exe"),
        ("Windows Server 2019", True, ".exe"),
    ],
)
def test_executable_suffix(os_name: str, is_windows: bool, suffix: str) -> None:
    """Uses .exe only on Windows."""
    platform = PlatformDescriptor(vm_name="OpenJDK Server VM", os_name=os_name)

    assert platform.is_windows is is_windows
    assert platform.executable_suffix == suffix


def test_is_frozen() -> None:
    """Descriptor cannot be modified after creation."""
    platform = PlatformDescriptor(vm_name="OpenJDK Server VM", os_name="linux")

    with pytest.raises(ValidationError):
        platform.vm_name = "OpenJDK Zero VM"  # type: ignore[misc]


def test_requires_vm_name() -> None:
    """Raises ValidationError without a VM name."""
    with pytest.raises(ValidationError):
        PlatformDescriptor.model_validate({"os_name": "linux"})
