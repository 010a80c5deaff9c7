"""Subprocess runners for the native test executable."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from gtest_wrapper.errors import LaunchError
from gtest_wrapper.models.result import ProcessOutcome

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SubprocessRunner(ABC):
    """Abstract base for running one command to completion."""

    @abstractmethod
    async def run(
        self,
        command: Sequence[str],
        env: Mapping[str, str],
    ) -> ProcessOutcome:
        """Run a command and wait for it to exit.

        Args:
            command: Executable path followed by its arguments
            env: Complete environment for the child process

        Returns:
            Exit code and combined stdout/stderr of the process

        Raises:
            LaunchError: If the process cannot be started

        """


@dataclass(frozen=True, kw_only=True)
class AsyncioSubprocessRunner(SubprocessRunner):
    """Runs commands with asyncio subprocesses, merging stderr into stdout.

    A child killed by a signal reports a negative exit code.
    """

    encoding: str = "utf-8"

    async def run(
        self,
        command: Sequence[str],
        env: Mapping[str, str],
    ) -> ProcessOutcome:
        """Spawn the command and collect its output."""
        log.info("Running command: %s", " ".join(command))
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                env=dict(env),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            raise LaunchError(f"Failed to launch {command[0]}: {e}") from e

        stdout, _ = await process.communicate()
        exit_code = process.returncode
        if exit_code is None:  # pragma: no cover
            raise LaunchError(f"No exit code reported for {command[0]}")

        log.info("Command exited with code %d", exit_code)
        return ProcessOutcome(
            exit_code=exit_code,
            output=stdout.decode(self.encoding, errors="replace"),
        )
