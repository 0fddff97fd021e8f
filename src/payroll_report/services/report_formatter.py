"""Rendering of payroll aggregates into their wire representation."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from payroll_report.models import EmployeeReport
from payroll_report.services.schemas import (
    EmployeeReportOut,
    PayPeriodOut,
    PayrollReport,
    PayrollReportResponse,
)

CENTS = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Render an amount as dollars with exactly two fraction digits."""
    amount = Decimal(amount)
    with localcontext() as ctx:
        # Room for every integer digit plus the cents.
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        cents = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"${cents}"


def format_employee_report(report: EmployeeReport) -> EmployeeReportOut:
    """Render one employee report."""
    return EmployeeReportOut(
        employee_id=report.employee_id,
        pay_period=PayPeriodOut(
            start_date=report.pay_period.start_date,
            end_date=report.pay_period.end_date,
        ),
        amount_paid=format_amount(report.amount),
    )


def build_payroll_report(reports: Iterable[EmployeeReport]) -> PayrollReportResponse:
    """Wrap rendered employee reports under the report field."""
    return PayrollReportResponse(
        payroll_report=PayrollReport(
            employee_reports=[format_employee_report(r) for r in reports],
        )
    )
