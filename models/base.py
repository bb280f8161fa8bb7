from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Shared configuration for mutable records."""
    model_config = ConfigDict(validate_assignment=True)


class FrozenGolfModel(BaseModel):
    """Immutable value objects: constructed once, never mutated."""
    model_config = ConfigDict(frozen=True)
