"""Document parsing.

Text whose first line is ``---`` is a structured document; anything else is
read as a legacy document.
"""

import logging
from pathlib import Path

from adrs.domain.record.model import Record, number_from_filename
from adrs.domain.record.parse.legacy import parse_legacy
from adrs.domain.record.parse.structured import DELIMITER, parse_structured
from adrs.domain.shared.error import FormatError, StorageError

logger = logging.getLogger(__name__)

__all__ = ["parse", "parse_file"]


def parse(text: str) -> Record:
    """Parse document text into a Record.

    Raises:
        FormatError: If a structured document's metadata is unclosed or invalid.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[0] == DELIMITER:
        return parse_structured(lines)
    return parse_legacy(lines)


def parse_file(path: Path) -> Record:
    """Read and parse a record file.

    A record without a number in its text takes the number from the
    filename's ``NNNN-`` prefix.

    Raises:
        FormatError: If the content is invalid, not UTF-8, or no number can be found.
        StorageError: If the file cannot be read.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FormatError("File is not valid UTF-8", path=path) from e
    except OSError as e:
        raise StorageError(f"Failed to read {path}: {e}", path=path) from e

    try:
        record = parse(text)
    except FormatError as e:
        raise FormatError(e.message, path=path) from e

    if record.number is None:
        number = number_from_filename(path.name)
        if number is None or number < 1:
            raise FormatError("No record number in title or filename", path=path)
        record.number = number

    record.source_path = path
    logger.debug(f"Parsed record {record.number} from {path}")
    return record
