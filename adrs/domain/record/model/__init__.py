"""Record domain model."""

from adrs.domain.record.model.aggregate import Record
from adrs.domain.record.model.naming import (
    RECORD_EXTENSION,
    number_from_filename,
    number_prefix,
    record_filename,
    slugify,
)
from adrs.domain.record.model.value import (
    Link,
    LinkKind,
    LinkType,
    RecordStatus,
    StatusKind,
)

__all__ = [
    "RECORD_EXTENSION",
    "Link",
    "LinkKind",
    "LinkType",
    "Record",
    "RecordStatus",
    "StatusKind",
    "number_from_filename",
    "number_prefix",
    "record_filename",
    "slugify",
]
