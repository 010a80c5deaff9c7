"""Launch native gtest binaries from a Python test harness."""

from gtest_wrapper.launcher import GTestWrapper, check_exit_value
from gtest_wrapper.models.config import WrapperConfig
from gtest_wrapper.models.result import TestResult
from gtest_wrapper.runner import AsyncioSubprocessRunner, SubprocessRunner

__all__ = [
    "AsyncioSubprocessRunner",
    "GTestWrapper",
    "SubprocessRunner",
    "TestResult",
    "WrapperConfig",
    "check_exit_value",
]
