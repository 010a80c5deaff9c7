"""CLI entry point for the native gtest wrapper."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from gtest_wrapper.config_loader import read_config_data
from gtest_wrapper.errors import ConfigurationError, LaunchError
from gtest_wrapper.launcher import GTestWrapper
from gtest_wrapper.models.config import WrapperConfig
from gtest_wrapper.models.result import TestResult
from gtest_wrapper.runner import AsyncioSubprocessRunner, SubprocessRunner

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "error": "❗",
}


def log_result_summary(log: logging.Logger, result: TestResult) -> None:
    """Log a formatted summary of the native test run."""
    log.info("=" * 80)
    log.info("Native Test Summary:")
    log.info("=" * 80)

    symbol = STATUS_SYMBOLS.get(result.status, "?")
    log.info("%s gtest: %s (%.2fs)", symbol, result.status, result.duration)
    if result.command:
        log.info("  Command: %s", " ".join(result.command))
    if result.exit_code is not None:
        log.info("  Exit code: %d", result.exit_code)
    if result.message:
        log.info("  Message: %s", result.message)
    if result.status == "failure" and result.output:
        log.error("Native test output:\n%s", result.output)


def format_output(result: TestResult) -> dict[str, Any]:
    """Format the result for JSON output."""
    return {
        "status": result.status,
        "exit_code": result.exit_code,
        "duration": result.duration,
        "command": list(result.command),
        "message": result.message,
    }


def build_config(
    config_path: Path | None, overrides: Mapping[str, Any]
) -> WrapperConfig:
    """Merge an optional config file with command line overrides.

    The file may be partial; the merged values are validated once.
    Overrides set to None are ignored.
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        data = read_config_data(config_path)
    data.update({key: value for key, value in overrides.items() if value is not None})
    return WrapperConfig.model_validate(data)


async def run(
    config_path: Path | None,
    overrides: Mapping[str, Any],
    runner: SubprocessRunner | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the native tests and return exit code."""
    log = logging.getLogger("gtest_wrapper")

    try:
        config = build_config(config_path, overrides)
        log.info("Running native tests (vm=%s, jdk=%s)", config.vm_name, config.jdk)
        wrapper = GTestWrapper(runner=runner or AsyncioSubprocessRunner())
        result = await wrapper.run(config, environ)
    except (ConfigurationError, LaunchError, FileNotFoundError, ValueError) as e:
        log.error("Native test setup failed: %s", e)
        result = TestResult(status="error", duration=0.0, message=str(e))

    log_result_summary(log, result)
    print(json.dumps(format_output(result), indent=2))

    return 0 if result.passed else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run the native gtest launcher for a JDK test image"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with wrapper configuration",
    )
    parser.add_argument(
        "--native-path",
        type=Path,
        default=None,
        help="Native test artifact directory (e.g. <image>/hotspot/jtreg/native)",
    )
    parser.add_argument(
        "--jdk",
        default=None,
        help="Path of the JDK under test",
    )
    parser.add_argument(
        "--vm-name",
        default=None,
        help="VM name of the JDK under test (e.g. 'OpenJDK 64-Bit Server VM')",
    )
    parser.add_argument(
        "--os-name",
        default=None,
        help="Host OS name, defaults to sys.platform",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            config_path=args.config,
            overrides={
                "native_path": args.native_path,
                "jdk": args.jdk,
                "vm_name": args.vm_name,
                "os_name": args.os_name,
            },
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
