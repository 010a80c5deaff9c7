"""Exceptions raised while resolving and launching the native test."""


class ConfigurationError(Exception):
    """Raised when the harness environment does not match the test image."""


class UnsupportedVariantError(ConfigurationError):
    """Raised when no known VM variant matches the platform."""


class NativeLibraryNotFoundError(ConfigurationError):
    """Raised when neither native artifact layout exists."""


class LaunchError(Exception):
    """Raised when the native executable cannot be spawned."""


class NativeTestFailedError(Exception):
    """Raised when the native test exits with an unexpected code."""

    def __init__(self, message: str, *, exit_code: int, output: str) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.output = output
