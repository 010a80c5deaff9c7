"""Resolve, launch and check the native gtest runner."""

import asyncio
import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from gtest_wrapper.environment import compose_environment
from gtest_wrapper.errors import NativeTestFailedError
from gtest_wrapper.locator import locate_native_dir
from gtest_wrapper.models.config import WrapperConfig
from gtest_wrapper.models.platform import PlatformDescriptor
from gtest_wrapper.models.result import ProcessOutcome, TestResult
from gtest_wrapper.runner import SubprocessRunner

log = logging.getLogger(__name__)

# Let exceptions escape the native tests so they surface as exit codes.
CATCH_EXCEPTIONS_FLAG = "--gtest_catch_exceptions=0"


def executable_path(
    native_dir: Path, platform: PlatformDescriptor, launcher_name: str
) -> Path:
    """Return the launcher path inside ``native_dir`` for the host."""
    return native_dir / f"{launcher_name}{platform.executable_suffix}"


def build_command(executable: Path, jdk: str) -> Sequence[str]:
    """Return the fixed native test command line."""
    return [str(executable), "-jdk", jdk, CATCH_EXCEPTIONS_FLAG]


def exit_value_message(expected: int, actual: int) -> str:
    """Describe an exit code mismatch."""
    message = (
        f"Expected to get exit value of [{expected}], exit value is: [{actual}]"
    )
    if actual < 0:
        message += f" (terminated by signal {-actual})"
    return message


def check_exit_value(outcome: ProcessOutcome, expected: int = 0) -> None:
    """Assert that a process exited with the expected code.

    Raises:
        NativeTestFailedError: With the exit code and output attached

    """
    if outcome.exit_code != expected:
        raise NativeTestFailedError(
            exit_value_message(expected, outcome.exit_code),
            exit_code=outcome.exit_code,
            output=outcome.output,
        )


@dataclass(frozen=True, kw_only=True)
class GTestWrapper:
    """Runs the native gtest launcher for the configured VM variant."""

    runner: SubprocessRunner

    async def run(
        self,
        config: WrapperConfig,
        environ: Mapping[str, str] | None = None,
    ) -> TestResult:
        """Locate the native runner, launch it once and report the outcome.

        Args:
            config: Paths and platform facts for this run
            environ: Inherited environment, defaults to ``os.environ``

        Returns:
            Success when the process exits with ``config.expected_exit_code``,
            failure with the captured output otherwise

        Raises:
            ConfigurationError: If the variant or native directory is unresolved
            LaunchError: If the executable cannot be started

        """
        platform = config.platform()
        variant = platform.variant()
        native_dir = locate_native_dir(config.native_path, variant)
        log.info("Using native directory %s (variant=%s)", native_dir, variant)

        env = compose_environment(
            native_dir,
            os.environ if environ is None else environ,
            config.library_path_variables,
        )
        command = build_command(
            executable_path(native_dir, platform, config.launcher_name), config.jdk
        )

        loop = asyncio.get_running_loop()
        started = loop.time()
        outcome = await self.runner.run(command, env)
        duration = loop.time() - started

        if outcome.exit_code == config.expected_exit_code:
            return TestResult(
                status="success",
                duration=duration,
                exit_code=outcome.exit_code,
                command=command,
                output=outcome.output,
            )

        message = exit_value_message(config.expected_exit_code, outcome.exit_code)
        log.error("Native tests failed: %s", message)
        return TestResult(
            status="failure",
            duration=duration,
            exit_code=outcome.exit_code,
            command=command,
            output=outcome.output,
            message=message,
        )
