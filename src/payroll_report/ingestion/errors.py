"""Ingestion error taxonomy.

Every error here aborts the current upload only and carries the exact
message returned to the client.
"""

from __future__ import annotations

EXPECTED_HEADER_TEXT = "date,hours worked,employee id,job group"


class IngestionError(Exception):
    """Base class for upload rejections."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FilenameError(IngestionError):
    """Raised when the upload's filename or extension is not accepted."""


class MissingFileError(IngestionError):
    """Raised when the request carries no file part."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Expected a file upload in form field '{field_name}'")


class DuplicateBatchError(IngestionError):
    """Raised when a time report with the same id was already ingested."""

    def __init__(self, batch_id: int):
        self.batch_id = batch_id
        super().__init__(f"A record with ID: {batch_id} already exists")


class CSVFormatError(IngestionError):
    """Raised when the upload cannot be read as a rectangular CSV table."""

    def __init__(self, message: str = "Unable to read csv"):
        super().__init__(message)


class HeaderError(IngestionError):
    """Raised when the column headers do not match the expected set."""

    def __init__(self) -> None:
        super().__init__(
            f"Incorrect number of column headers found. Expected: {EXPECTED_HEADER_TEXT}"
        )


class RowError(IngestionError):
    """Raised when one field of a data row cannot be parsed."""

    def __init__(self, field: str, value: str, message: str):
        self.field = field
        self.value = value
        super().__init__(message)


class DateFormatError(RowError):
    """Raised for dates that are not day/month/year."""

    def __init__(self, value: str):
        super().__init__(
            "date",
            value,
            f"parsing date {value!r}: expected day/month/year (e.g. 14/11/2023)",
        )


class NumericFormatError(RowError):
    """Raised for hours or employee ids that are not numbers."""

    def __init__(self, field: str, value: str, kind: str, reason: str = "invalid syntax"):
        self.kind = kind
        self.reason = reason
        super().__init__(field, value, f"parsing {field} {value!r} as {kind}: {reason}")


class ValueRangeError(IngestionError):
    """Raised when a row's hours or running total do not fit the stored columns."""

    def __init__(self, batch_id: int):
        self.batch_id = batch_id
        super().__init__(f"Time report {batch_id} holds values out of the storable range")
