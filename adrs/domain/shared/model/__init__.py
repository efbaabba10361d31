from adrs.domain.shared.model.aggregate import Aggregate
from adrs.domain.shared.model.value import RootValueObject, ValueObject

__all__ = ["Aggregate", "RootValueObject", "ValueObject"]
