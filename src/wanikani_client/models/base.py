from pydantic import BaseModel, ConfigDict


class WaniKaniModel(BaseModel):
    """Immutable base for every decoded value object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
