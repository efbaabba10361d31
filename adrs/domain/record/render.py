"""Render records back into document text.

Compatible mode writes a Nygard document. ng mode writes the same body
behind a YAML metadata block. Parsing rendered ng output gives back the
same number, title, date, status and links.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

import yaml

from adrs.domain.record.model import Link, Record, record_filename

CONTEXT_PLACEHOLDER = "What is the issue that we're seeing that is motivating this decision or change?"
DECISION_PLACEHOLDER = "What is the change that we're proposing and/or doing?"
CONSEQUENCES_PLACEHOLDER = "What becomes easier or more difficult to do because of this change?"

_UNKNOWN_TITLE = "..."


class Mode(StrEnum):
    """Serialization mode of a collection."""

    COMPATIBLE = "compatible"
    NG = "ng"


def _link_line(link: Link, titles: Mapping[int, str]) -> str:
    title = titles.get(link.target)
    if title is None:
        target = f"{link.target:04d}-{_UNKNOWN_TITLE}.md"
        title = _UNKNOWN_TITLE
    else:
        target = record_filename(link.target, title)
    return f"{link.kind} [{link.target}. {title}]({target})"


def _frontmatter(record: Record) -> str:
    meta: dict[str, Any] = {
        "number": record.number,
        "title": record.title,
        "date": record.date,
        "status": record.status.canonical,
    }
    if record.links:
        meta["links"] = [
            {"target": link.target, "kind": link.kind.canonical}
            | ({"description": link.description} if link.description else {})
            for link in record.links
        ]
    for key, values in (
        ("tags", record.tags),
        ("decision-makers", record.decision_makers),
        ("consulted", record.consulted),
        ("informed", record.informed),
    ):
        if values:
            meta[key] = list(values)

    dumped = yaml.safe_dump(meta, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return f"---\n{dumped}---\n\n"


def render_body(record: Record, titles: Mapping[int, str] | None = None) -> str:
    titles = titles or {}
    status_block = "\n\n".join(
        [str(record.status), *(_link_line(link, titles) for link in record.links)]
    )
    return (
        f"# {record.full_title()}\n\n"
        f"Date: {record.date.isoformat()}\n\n"
        f"## Status\n\n{status_block}\n\n"
        f"## Context\n\n{record.context or CONTEXT_PLACEHOLDER}\n\n"
        f"## Decision\n\n{record.decision or DECISION_PLACEHOLDER}\n\n"
        f"## Consequences\n\n{record.consequences or CONSEQUENCES_PLACEHOLDER}\n"
    )


def render(record: Record, mode: Mode, titles: Mapping[int, str] | None = None) -> str:
    """Render ``record`` as document text.

    Args:
        record: The record to render. Its number must be set.
        mode: Serialization mode.
        titles: Titles of other records by number, used for link lines.
    """
    record.require_number()
    body = render_body(record, titles)
    if mode == Mode.NG:
        return _frontmatter(record) + body
    return body
