"""Payroll report services."""

from payroll_report.services.report_formatter import (
    build_payroll_report,
    format_amount,
    format_employee_report,
)
from payroll_report.services.report_service import ReportAggregator
from payroll_report.services.schemas import (
    EmployeeReportOut,
    PayPeriodOut,
    PayrollReport,
    PayrollReportResponse,
)

__all__ = [
    "build_payroll_report",
    "format_amount",
    "format_employee_report",
    "ReportAggregator",
    "EmployeeReportOut",
    "PayPeriodOut",
    "PayrollReport",
    "PayrollReportResponse",
]
