"""Base model shared by configuration and platform models."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that rejects unknown keys, so config typos fail early."""

    model_config = ConfigDict(frozen=True, extra="forbid")
