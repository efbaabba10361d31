"""Filename conventions for record documents.

Files are named ``NNNN-slug.md``: the record number zero-padded to at least
four digits, then a slug of the title.
"""

import re

RECORD_EXTENSION = ".md"

_SEPARATOR = "-"
_NON_SLUG = re.compile(r"[^a-z0-9]+")
_NUMBER_PREFIX = re.compile(r"^(\d{4,})-")


def slugify(title: str) -> str:
    """Lower-case ``title`` and reduce it to ASCII alphanumerics joined by single dashes."""
    return _NON_SLUG.sub(_SEPARATOR, title.lower()).strip(_SEPARATOR)


def number_prefix(number: int) -> str:
    """The ``NNNN-`` prefix every file of record ``number`` starts with."""
    return f"{number:04d}{_SEPARATOR}"


def record_filename(number: int, title: str) -> str:
    return f"{number_prefix(number)}{slugify(title)}{RECORD_EXTENSION}"


def number_from_filename(filename: str) -> int | None:
    """Read the leading ``NNNN-`` number of a filename, if it has one."""
    match = _NUMBER_PREFIX.match(filename)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None
