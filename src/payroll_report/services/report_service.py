"""Per-employee, per-period payroll aggregation."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from payroll_report.calculators.pay_period import PayPeriodWindow
from payroll_report.database import dialect_insert
from payroll_report.models import EmployeeReport, PayPeriod


class ReportAggregator:
    """Accumulates payroll amounts into employee reports.

    Key invariants:
    1. One employee_report row per (employee_id, pay_period_start)
    2. Contributions are added with a single INSERT ... ON CONFLICT DO UPDATE,
       so concurrent contributions to the same key never lose an update
    3. Rows are never replaced or deleted here
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def accumulate(
        self,
        employee_id: int,
        period: PayPeriodWindow,
        amount: Decimal,
    ) -> None:
        """Add an amount to the employee's total for a pay period."""
        insert = dialect_insert(self.session)

        period_insert = (
            insert(PayPeriod)
            .values(start_date=period.start_date, end_date=period.end_date)
            .on_conflict_do_nothing(index_elements=["start_date"])
        )
        await self.session.execute(period_insert)

        report_insert = insert(EmployeeReport).values(
            employee_id=employee_id,
            pay_period_start=period.start_date,
            amount=amount,
        )
        report_upsert = report_insert.on_conflict_do_update(
            index_elements=["employee_id", "pay_period_start"],
            set_={"amount": EmployeeReport.amount + report_insert.excluded.amount},
        )
        await self.session.execute(report_upsert)

    async def list_all(self) -> list[EmployeeReport]:
        """Get every employee report with its pay period, in a stable order."""
        result = await self.session.execute(
            select(EmployeeReport)
            .options(selectinload(EmployeeReport.pay_period))
            .order_by(EmployeeReport.employee_id, EmployeeReport.pay_period_start)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
