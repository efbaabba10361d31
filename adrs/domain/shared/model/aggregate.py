from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Mutable domain object persisted as a unit."""

    model_config = ConfigDict(validate_assignment=True)
