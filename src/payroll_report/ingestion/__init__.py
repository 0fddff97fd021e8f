"""Time report ingestion."""

from payroll_report.ingestion.errors import (
    CSVFormatError,
    DateFormatError,
    DuplicateBatchError,
    FilenameError,
    HeaderError,
    IngestionError,
    MissingFileError,
    NumericFormatError,
    RowError,
    ValueRangeError,
)
from payroll_report.ingestion.pipeline import IngestionPipeline, IngestionResult

__all__ = [
    "CSVFormatError",
    "DateFormatError",
    "DuplicateBatchError",
    "FilenameError",
    "HeaderError",
    "IngestionError",
    "MissingFileError",
    "NumericFormatError",
    "RowError",
    "ValueRangeError",
    "IngestionPipeline",
    "IngestionResult",
]
