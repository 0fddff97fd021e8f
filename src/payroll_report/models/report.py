"""Pay period and per-employee payroll aggregate models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from payroll_report.models.base import Base


class PayPeriod(Base):
    """Half-month window. Only created when an aggregate first references it."""

    __tablename__ = "pay_period"

    start_date: Mapped[date] = mapped_column(Date, primary_key=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships
    employee_reports: Mapped[list[EmployeeReport]] = relationship(back_populates="pay_period")


class EmployeeReport(Base):
    """Accumulated amount paid to one employee within one pay period.

    Rows are never overwritten: every contribution is added to ``amount``.
    """

    __tablename__ = "employee_report"

    employee_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    pay_period_start: Mapped[date] = mapped_column(
        Date,
        ForeignKey("pay_period.start_date"),
        primary_key=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 4), nullable=False, default=Decimal("0"))

    # Relationships
    pay_period: Mapped[PayPeriod] = relationship(back_populates="employee_reports")
