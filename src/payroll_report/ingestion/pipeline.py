"""Atomic, idempotent ingestion of uploaded time reports."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_report.calculators.pay_period import resolve_pay_period
from payroll_report.calculators.rate_table import RateTable
from payroll_report.ingestion.errors import (
    DuplicateBatchError,
    IngestionError,
    ValueRangeError,
)
from payroll_report.ingestion.parser import (
    ParsedRecord,
    parse_batch_id,
    parse_header,
    parse_row,
    read_rows,
)
from payroll_report.models import TimeReport, TimeSheetEntry
from payroll_report.services.report_service import ReportAggregator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of a committed upload."""

    batch_id: int
    inserted_count: int

    @property
    def message(self) -> str:
        return f"Success! Added time report with ID: {self.batch_id}"


class IngestionPipeline:
    """Ingests one time report per call as a single transaction.

    Flow:
    1. Reject batch ids that were already ingested (plain lookup, fast path)
    2. Validate the CSV shape and header before touching any row
    3. Claim the batch id by inserting its time_report row; a concurrent
       upload with the same id loses on the primary key
    4. Per row: store the raw entry, resolve its pay period, price it with
       the rate table and add it to the employee report
    5. Commit, or roll back everything on the first failure
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.aggregator = ReportAggregator(session)

    async def ingest_upload(self, filename: str, data: bytes) -> IngestionResult:
        """Ingest an uploaded file, deriving the batch id from its name."""
        batch_id = parse_batch_id(filename)
        return await self.ingest(batch_id, data, filename=filename)

    async def ingest(
        self,
        batch_id: int,
        data: bytes,
        filename: str | None = None,
    ) -> IngestionResult:
        """Ingest the CSV content of one batch.

        Raises:
            DuplicateBatchError: If the batch id was already ingested
            CSVFormatError, HeaderError: If the table shape is wrong
            DateFormatError, NumericFormatError: On the first bad field
            ValueRangeError: If the database rejects a value as out of range
        """
        try:
            if await self._batch_exists(batch_id):
                raise DuplicateBatchError(batch_id)

            rows = read_rows(data)
            parse_header(rows[0] if rows else None)

            await self._claim_batch(batch_id, filename)
            rate_table = await RateTable.load(self.session)

            inserted = 0
            for row in rows[1:]:
                record = parse_row(row)
                if await self._store_entry(batch_id, record):
                    inserted += 1
                await self.aggregator.accumulate(
                    employee_id=record.employee_id,
                    period=resolve_pay_period(record.work_date),
                    amount=rate_table.amount_for(record.pay_group, record.hours_worked),
                )

            await self.session.commit()
        except IngestionError as exc:
            await self.session.rollback()
            logger.warning("Rejected time report %s: %s", batch_id, exc.message)
            raise
        except DataError as exc:
            await self.session.rollback()
            logger.warning("Rejected time report %s: value out of range", batch_id)
            raise ValueRangeError(batch_id) from exc
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Database error while ingesting time report %s", batch_id)
            raise

        logger.info("Ingested time report %s (%d rows)", batch_id, inserted)
        return IngestionResult(batch_id=batch_id, inserted_count=inserted)

    async def _batch_exists(self, batch_id: int) -> bool:
        """Check whether a time report was already committed for this id."""
        return await self.session.get(TimeReport, batch_id) is not None

    async def _claim_batch(self, batch_id: int, filename: str | None) -> None:
        """Insert the time_report row; a primary key conflict means a duplicate."""
        self.session.add(TimeReport(report_id=batch_id, filename=filename))
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateBatchError(batch_id) from exc

    async def _store_entry(self, batch_id: int, record: ParsedRecord) -> bool:
        """First-or-create the raw entry. Returns True if a row was created."""
        key = (batch_id, record.work_date, record.employee_id)
        if await self.session.get(TimeSheetEntry, key) is not None:
            return False

        self.session.add(
            TimeSheetEntry(
                report_id=batch_id,
                work_date=record.work_date,
                employee_id=record.employee_id,
                hours_worked=record.hours_worked,
                pay_group=record.pay_group,
            )
        )
        await self.session.flush()
        return True
