"""Structured documents: a YAML metadata block between ``---`` lines, then a markdown body."""

import datetime as dt
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from adrs.domain.record.model import Link, Record, RecordStatus, StatusKind
from adrs.domain.record.parse.sections import BODY_SECTIONS, split_sections
from adrs.domain.shared.error import FormatError

DELIMITER = "---"


class Frontmatter(BaseModel):
    """Recognised metadata keys. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    number: int | None = Field(default=None, ge=1)
    title: str
    date: dt.date | None = None
    status: RecordStatus = RecordStatus(StatusKind.PROPOSED)
    links: list[Link] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    decision_makers: list[str] = Field(default_factory=list, alias="decision-makers")
    consulted: list[str] = Field(default_factory=list)
    informed: list[str] = Field(default_factory=list)


def split_frontmatter(lines: list[str]) -> tuple[list[str], list[str]]:
    """Separate the metadata lines from the body lines.

    ``lines[0]`` must be the opening delimiter.
    """
    for index, line in enumerate(lines[1:], start=1):
        if line == DELIMITER:
            return lines[1:index], lines[index + 1 :]
    raise FormatError("Unclosed metadata block: no closing '---' line")


def _load_metadata(lines: list[str]) -> dict[str, Any]:
    try:
        data = yaml.safe_load("\n".join(lines))
    except (yaml.YAMLError, ValueError) as e:
        # PyYAML raises plain ValueError for out-of-range timestamps and oversized ints
        raise FormatError(f"Invalid metadata block: {e}") from e
    if not isinstance(data, dict):
        raise FormatError("Invalid metadata block: expected a mapping of fields")
    return data


def parse_structured(lines: list[str]) -> Record:
    meta_lines, body_lines = split_frontmatter(lines)
    data = _load_metadata(meta_lines)

    # An explicit null status means "no status", not the default
    if "status" in data and data["status"] is None:
        data["status"] = ""

    try:
        meta = Frontmatter.model_validate(data)
    except PydanticValidationError as e:
        raise FormatError(f"Invalid metadata field: {e.errors()[0]['msg']}") from e

    sections = split_sections(body_lines, respect_fences=True)
    record = Record(
        number=meta.number,
        title=meta.title,
        status=meta.status,
        links=list(meta.links),
        tags=meta.tags,
        decision_makers=meta.decision_makers,
        consulted=meta.consulted,
        informed=meta.informed,
        **{name: sections.get(name, "") for name in BODY_SECTIONS},
    )
    if meta.date is not None:
        record.date = meta.date
    return record
