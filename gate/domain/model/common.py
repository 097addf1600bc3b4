"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain entity; changes go through ``model_copy``."""

    model_config = ConfigDict(frozen=True)
