"""Value object bases.

Value objects are immutable and compared by value. ``RootValueObject`` wraps a
single value (a number, a tag) so that validation and coercion live on the type.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
