"""Uploaded time report and raw time-sheet models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from payroll_report.models.base import Base, TimestampMixin


class TimeReport(Base, TimestampMixin):
    """One ingested upload, keyed by the id embedded in its filename.

    The primary key doubles as the batch claim: a second insert for the
    same id fails with a constraint violation.
    """

    __tablename__ = "time_report"

    report_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    filename: Mapped[str | None] = mapped_column(String, nullable=True)

    # Relationships
    entries: Mapped[list[TimeSheetEntry]] = relationship(back_populates="report")


class TimeSheetEntry(Base):
    """Raw hours worked by one employee on one day, as uploaded. Insert-only."""

    __tablename__ = "time_sheet"

    report_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("time_report.report_id", ondelete="CASCADE"),
        primary_key=True,
    )
    work_date: Mapped[date] = mapped_column(Date, primary_key=True)
    employee_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    hours_worked: Mapped[Decimal] = mapped_column(Numeric(10, 4), nullable=False)
    # Not a foreign key: unknown groups are stored and paid at a zero rate.
    pay_group: Mapped[str] = mapped_column(String(191), nullable=False)

    # Relationships
    report: Mapped[TimeReport] = relationship(back_populates="entries")
