"""Map the VM build variant to its native artifact subdirectory."""

from typing import Literal, Protocol

from gtest_wrapper.errors import UnsupportedVariantError

type VmVariant = Literal["server", "client", "minimal", "zero"]


class VariantPredicates(Protocol):
    """Platform facts identifying the VM build variant."""

    @property
    def vm_name(self) -> str:
        """VM name the predicates are derived from."""

    @property
    def is_server(self) -> bool:
        """Whether the VM is the server variant."""

    @property
    def is_client(self) -> bool:
        """Whether the VM is the client variant."""

    @property
    def is_minimal(self) -> bool:
        """Whether the VM is the minimal variant."""

    @property
    def is_zero(self) -> bool:
        """Whether the VM is the zero variant."""


def resolve_vm_variant(platform: VariantPredicates) -> VmVariant:
    """Return the subdirectory name for the platform's VM variant.

    Raises:
        UnsupportedVariantError: If none of the variant predicates hold

    """
    if platform.is_server:
        return "server"
    if platform.is_client:
        return "client"
    if platform.is_minimal:
        return "minimal"
    if platform.is_zero:
        return "zero"
    raise UnsupportedVariantError(
        f"TESTBUG: unsupported vm variant (vm name: {platform.vm_name!r})"
    )
