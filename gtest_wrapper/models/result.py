"""Models for native test execution results."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class ProcessOutcome:
    """Exit status and combined stdout/stderr of a finished process."""

    exit_code: int
    output: str = field(default="", repr=False)


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Result of a single native test execution.

    ``exit_code`` and ``command`` are unset when the run failed before the
    executable was started.
    """

    __test__ = False

    status: Literal["success", "failure", "error"]
    duration: float
    exit_code: int | None = None
    command: Sequence[str] = ()
    output: str = field(default="", repr=False)
    message: str | None = None

    @property
    def passed(self) -> bool:
        """Whether the native test passed."""
        return self.status == "success"
