"""Load wrapper configuration from YAML files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gtest_wrapper.models.config import WrapperConfig


def read_config_data(path: Path) -> dict[str, Any]:
    """Read a configuration file as an unvalidated mapping.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, not valid YAML, or not a mapping

    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {path}")
    if not isinstance(data, dict):
        raise ValueError(f"Invalid wrapper config schema in {path}: expected a mapping")

    return data


def load_wrapper_config(path: Path) -> WrapperConfig:
    """Load and validate a wrapper configuration file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, not valid YAML, or fails validation

    """
    data = read_config_data(path)

    try:
        return WrapperConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid wrapper config schema in {path}: {e}") from e
