# backend/services/csv_parser.py

import logging
from dataclasses import dataclass, field
from typing import List

from models.property_models import PROPERTY_FIELDS, Property

logger = logging.getLogger(__name__)


class CsvParseError(Exception):
    """Base class for upload parsing failures."""


class CsvDecodeError(CsvParseError):
    pass


class CsvRowError(CsvParseError):
    def __init__(self, row_number: int, column_count: int):
        self.row_number = row_number
        self.column_count = column_count
        super().__init__(
            f"Row {row_number} has {column_count} columns, expected {len(PROPERTY_FIELDS)}"
        )


@dataclass
class ParseResult:
    properties: List[Property] = field(default_factory=list)
    # 1-based data row numbers (header excluded) that were dropped
    skipped_rows: List[int] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_rows)


def decode_upload(content: bytes) -> str:
    """
    Decode uploaded bytes as UTF-8.
    Anything else fails the whole upload.
    """
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("Upload is not valid UTF-8: %s", e)
        raise CsvDecodeError(f"Upload is not valid UTF-8 (byte {e.start})") from e


def split_lines(text: str) -> List[str]:
    """
    Split on "\n" or "\r\n" only. A trailing newline does not add an empty line.
    Other Unicode line separators stay inside the cell text.
    """
    lines = text.split("\n")
    # The last piece was not ended by "\n", so a trailing "\r" there is cell text.
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def parse_row(row_number: int, line: str) -> Property | None:
    """
    Map one comma-split line onto a Property, positionally.
    No quoting or escaping: a comma always separates columns.
    Returns None when the line has fewer columns than PROPERTY_FIELDS.
    """
    columns = line.split(",")
    if len(columns) < len(PROPERTY_FIELDS):
        return None

    values = dict(zip(PROPERTY_FIELDS, columns))
    return Property(id=row_number, **values)


def parse_properties(text: str, strict: bool = False) -> ParseResult:
    """
    Parse CSV text into Properties.

    - The first line is a header and is discarded without inspection.
    - A data row's id is its 1-based position after the header, so
      skipped rows leave gaps instead of shifting later ids.
    - Lenient (default): short rows are skipped and recorded in skipped_rows.
    - Strict: the first short row raises CsvRowError and nothing is returned.
    """
    result = ParseResult()
    lines = split_lines(text)

    for row_number, line in enumerate(lines[1:], start=1):
        prop = parse_row(row_number, line)

        if prop is None:
            column_count = len(line.split(","))
            if strict:
                logger.warning("Aborting upload: row %d has %d columns", row_number, column_count)
                raise CsvRowError(row_number, column_count)
            logger.warning("Skipping row %d: %d columns", row_number, column_count)
            result.skipped_rows.append(row_number)
            continue

        result.properties.append(prop)

    return result


def parse_csv_bytes(content: bytes, strict: bool = False) -> ParseResult:
    return parse_properties(decode_upload(content), strict=strict)
