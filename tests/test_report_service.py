"""Tests for report aggregation."""

from datetime import date
from decimal import Decimal

from sqlalchemy import func, select

from payroll_report.calculators.pay_period import PayPeriodWindow, resolve_pay_period
from payroll_report.models import EmployeeReport, PayPeriod
from payroll_report.services.report_service import ReportAggregator

MARCH_FIRST_HALF = PayPeriodWindow(date(2023, 3, 1), date(2023, 3, 15))
MARCH_SECOND_HALF = PayPeriodWindow(date(2023, 3, 16), date(2023, 3, 30))


class TestAccumulate:
    """Test accumulate-on-conflict upserts."""

    async def test_first_contribution_creates_report(self, session):
        aggregator = ReportAggregator(session)

        await aggregator.accumulate(1, MARCH_FIRST_HALF, Decimal("160.00"))
        reports = await aggregator.list_all()

        assert len(reports) == 1
        assert reports[0].employee_id == 1
        assert reports[0].amount == Decimal("160.00")
        assert reports[0].pay_period.end_date == date(2023, 3, 15)

    async def test_same_key_adds_amounts(self, session):
        """Two contributions to one key give one row holding the sum."""
        aggregator = ReportAggregator(session)

        await aggregator.accumulate(1, MARCH_FIRST_HALF, Decimal("160.00"))
        await aggregator.accumulate(1, MARCH_FIRST_HALF, Decimal("37.50"))
        reports = await aggregator.list_all()

        assert len(reports) == 1
        assert reports[0].amount == Decimal("197.50")

    async def test_different_periods_are_separate(self, session):
        aggregator = ReportAggregator(session)

        await aggregator.accumulate(1, MARCH_FIRST_HALF, Decimal("10"))
        await aggregator.accumulate(1, MARCH_SECOND_HALF, Decimal("20"))
        await aggregator.accumulate(2, MARCH_FIRST_HALF, Decimal("30"))

        reports = await aggregator.list_all()
        period_count = await session.scalar(select(func.count()).select_from(PayPeriod))

        assert [(r.employee_id, r.pay_period_start, r.amount) for r in reports] == [
            (1, date(2023, 3, 1), Decimal("10")),
            (1, date(2023, 3, 16), Decimal("20")),
            (2, date(2023, 3, 1), Decimal("30")),
        ]
        assert period_count == 2

    async def test_accumulation_survives_commit(self, session_factory):
        """Contributions from separate transactions keep adding up."""
        period = resolve_pay_period(date(2023, 3, 20))

        for amount in ("100", "50"):
            async with session_factory() as session:
                await ReportAggregator(session).accumulate(7, period, Decimal(amount))
                await session.commit()

        async with session_factory() as session:
            report = await session.get(EmployeeReport, (7, period.start_date))

        assert report.amount == Decimal("150")


class TestListAll:
    """Test the report read path."""

    async def test_empty(self, session):
        assert await ReportAggregator(session).list_all() == []

    async def test_ordered_by_employee_then_period(self, session):
        aggregator = ReportAggregator(session)

        await aggregator.accumulate(2, MARCH_SECOND_HALF, Decimal("1"))
        await aggregator.accumulate(1, MARCH_SECOND_HALF, Decimal("1"))
        await aggregator.accumulate(2, MARCH_FIRST_HALF, Decimal("1"))

        reports = await aggregator.list_all()

        assert [(r.employee_id, r.pay_period_start) for r in reports] == [
            (1, date(2023, 3, 16)),
            (2, date(2023, 3, 1)),
            (2, date(2023, 3, 16)),
        ]
