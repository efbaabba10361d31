"""Legacy (adr-tools compatible) documents.

    # 2. Use PostgreSQL

    Date: 2024-01-15

    ## Status

    Accepted

    Supersedes [1. Use MySQL](0001-use-mysql.md)

    ## Context
    ...
"""

import datetime as dt
import logging
import re

from adrs.domain.record.model import Link, LinkKind, Record, RecordStatus
from adrs.domain.record.parse.sections import BODY_SECTIONS, split_sections

logger = logging.getLogger(__name__)

_TITLE_PREFIX = "# "
_DATE_PREFIX = "Date:"
_NUMBERED_TITLE = re.compile(r"^(\d+)\. (.*)$")
_LINK_LINE = re.compile(r"^(\w[\w\s-]*?)\s+\[(\d+)\.\s+[^\]]*\]\(\d{4,}-[^)]*\.md\)$")
_STATUS_WORDS = frozenset(
    {"proposed", "accepted", "deprecated", "superseded", "superceded", "draft", "rejected"}
)


def _to_int(digits: str) -> int | None:
    """Convert matched digits, or None when they exceed the interpreter's conversion limit."""
    try:
        return int(digits)
    except ValueError:
        logger.debug("Ignoring unconvertible number of %d digits", len(digits))
        return None


def _read_title(line: str) -> tuple[int | None, str]:
    title = line[len(_TITLE_PREFIX) :].strip()
    match = _NUMBERED_TITLE.match(title)
    number = _to_int(match.group(1)) if match else None
    if match and number is not None and number > 0:
        return number, match.group(2).strip()
    return None, title


def _read_date(line: str) -> dt.date | None:
    text = line[len(_DATE_PREFIX) :].strip()
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        logger.debug("Ignoring unparseable date %r", text)
        return None


def parse_status_section(text: str) -> tuple[RecordStatus | None, list[Link]]:
    """Read the status word and link lines out of a ``## Status`` section.

    Link lines never change the status; only a bare status word does.
    """
    status: RecordStatus | None = None
    links: list[Link] = []

    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        match = _LINK_LINE.match(line)
        target = _to_int(match.group(2)) if match else None
        if match and target is not None:
            links.append(Link(target=target, kind=LinkKind(match.group(1).strip())))
            continue
        if "[" in line or "]" in line:
            continue
        word = line.split()[0]
        if word.lower() in _STATUS_WORDS:
            status = RecordStatus(word)

    return status, links


def parse_legacy(lines: list[str]) -> Record:
    number: int | None = None
    title = ""
    date: dt.date | None = None

    for line in lines:
        if line.startswith("## "):
            break
        if not title and line.startswith(_TITLE_PREFIX):
            number, title = _read_title(line)
        elif date is None and line.startswith(_DATE_PREFIX):
            date = _read_date(line)

    sections = split_sections(lines)
    record = Record(
        number=number,
        title=title,
        **{name: sections.get(name, "") for name in BODY_SECTIONS},
    )
    if date is not None:
        record.date = date

    if "status" in sections:
        status, links = parse_status_section(sections["status"])
        if status is not None:
            record.status = status
        record.links = links
    return record
