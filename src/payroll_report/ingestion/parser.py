"""Time report CSV parsing and validation."""

from __future__ import annotations

import csv
import io
import os
import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from payroll_report.ingestion.errors import (
    CSVFormatError,
    DateFormatError,
    FilenameError,
    HeaderError,
    NumericFormatError,
)

EXPECTED_HEADER = ("date", "hours worked", "employee id", "job group")
CSV_EXTENSION = ".csv"
DATE_FORMAT = "%d/%m/%Y"

# <prefix>-<prefix>-<id>, e.g. time-report-42
_FILENAME_PATTERN = re.compile(r"^[^-]+-[^-]+-(\d+)$")
_MAX_BATCH_ID = 2**31 - 1

# Plain ASCII numbers: no whitespace, no digit separators, no inf or nan.
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# Bounds of the time_sheet columns: hours are Numeric(10, 4), ids are 32-bit.
MAX_HOURS = Decimal("1000000")
MIN_EMPLOYEE_ID = -(2**31)
MAX_EMPLOYEE_ID = 2**31 - 1


@dataclass(frozen=True)
class ParsedRecord:
    """One validated time-sheet row."""

    work_date: date
    hours_worked: Decimal
    employee_id: int
    pay_group: str


def parse_batch_id(filename: str) -> int:
    """Extract the batch id from an upload filename such as ``time-report-42.csv``.

    Raises:
        FilenameError: If the extension is not ``.csv`` or the stem has no id
    """
    stem, ext = os.path.splitext(os.path.basename(filename or ""))
    if ext != CSV_EXTENSION:
        raise FilenameError("Expected a CSV (.csv) file")

    match = _FILENAME_PATTERN.match(stem)
    if match is None or int(match.group(1)) > _MAX_BATCH_ID:
        raise FilenameError(
            "The provided filename is incorrectly formatted. Expected time-report-{id}.csv"
        )
    return int(match.group(1))


def read_rows(data: bytes) -> list[list[str]]:
    """Decode an upload and split it into CSV rows.

    Blank lines are skipped. Every remaining row must have as many fields as
    the first one.
    """
    try:
        text = data.decode("utf-8-sig")
        rows = [row for row in csv.reader(io.StringIO(text, newline=""), strict=True) if row]
    except (UnicodeDecodeError, csv.Error) as exc:
        raise CSVFormatError() from exc

    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise CSVFormatError()
    return rows


def parse_header(row: list[str] | None) -> None:
    """Validate the header row (exact names, exact order)."""
    if row is None or tuple(row) != EXPECTED_HEADER:
        raise HeaderError()


def parse_row(row: list[str]) -> ParsedRecord:
    """Parse a data row into a ParsedRecord.

    Fields are checked in column order and the first bad field is reported.

    Raises:
        DateFormatError: If the date is not day/month/year
        NumericFormatError: If hours worked or employee id are not numbers
            or do not fit their columns
    """
    if len(row) != len(EXPECTED_HEADER):
        raise CSVFormatError()
    raw_date, raw_hours, raw_employee_id, pay_group = row

    try:
        work_date = datetime.strptime(raw_date, DATE_FORMAT).date()
    except ValueError as exc:
        raise DateFormatError(raw_date) from exc

    hours_worked = _parse_hours(raw_hours)
    employee_id = _parse_employee_id(raw_employee_id)

    return ParsedRecord(
        work_date=work_date,
        hours_worked=hours_worked,
        employee_id=employee_id,
        pay_group=pay_group,
    )


def _parse_hours(token: str) -> Decimal:
    if _FLOAT_PATTERN.fullmatch(token) is None:
        raise NumericFormatError("hours worked", token, "float")
    try:
        hours = Decimal(token)
    except InvalidOperation as exc:
        raise NumericFormatError("hours worked", token, "float") from exc
    if hours.copy_abs() >= MAX_HOURS:
        raise NumericFormatError("hours worked", token, "float", reason="value out of range")
    return hours


def _parse_employee_id(token: str) -> int:
    if _INTEGER_PATTERN.fullmatch(token) is None:
        raise NumericFormatError("employee id", token, "integer")
    try:
        employee_id = int(token)
    except ValueError as exc:
        # Longer than the interpreter converts; far past any 32-bit id.
        raise NumericFormatError(
            "employee id", token, "integer", reason="value out of range"
        ) from exc
    if not MIN_EMPLOYEE_ID <= employee_id <= MAX_EMPLOYEE_ID:
        raise NumericFormatError("employee id", token, "integer", reason="value out of range")
    return employee_id
