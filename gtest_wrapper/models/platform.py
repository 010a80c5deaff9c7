"""Platform descriptor for the VM under test."""

import sys

from pydantic import Field

from gtest_wrapper.models.base import Model
from gtest_wrapper.variant import VmVariant, resolve_vm_variant


class PlatformDescriptor(Model):
    """VM and host facts supplied by the harness.

    The variant predicates follow the VM name reported by the JDK under test,
    e.g. "OpenJDK 64-Bit Server VM".
    """

    vm_name: str = Field(..., description="VM name reported by the JDK")
    os_name: str = Field(
        default=sys.platform, description="Host OS name (sys.platform style)"
    )

    @property
    def is_server(self) -> bool:
        """Whether the VM is the server variant."""
        return self.vm_name.endswith(" Server VM")

    @property
    def is_client(self) -> bool:
        """Whether the VM is the client variant."""
        return self.vm_name.endswith(" Client VM")

    @property
    def is_minimal(self) -> bool:
        """Whether the VM is the minimal variant."""
        return self.vm_name.endswith(" Minimal VM")

    @property
    def is_zero(self) -> bool:
        """Whether the VM is the zero variant."""
        return self.vm_name.endswith(" Zero VM")

    @property
    def is_windows(self) -> bool:
        """Whether the host runs Windows."""
        return self.os_name.lower().startswith("win")

    @property
    def executable_suffix(self) -> str:
        """Suffix appended to native executable names on this host."""
        return ".exe" if self.is_windows else ""

    def variant(self) -> VmVariant:
        """Return the VM variant subdirectory name."""
        return resolve_vm_variant(self)
