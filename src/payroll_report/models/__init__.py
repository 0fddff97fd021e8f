"""ORM models for the payroll report service."""

from payroll_report.models.base import Base, TimestampMixin
from payroll_report.models.pay_group import PayGroup
from payroll_report.models.report import EmployeeReport, PayPeriod
from payroll_report.models.timesheet import TimeReport, TimeSheetEntry

__all__ = [
    "Base",
    "TimestampMixin",
    "PayGroup",
    "EmployeeReport",
    "PayPeriod",
    "TimeReport",
    "TimeSheetEntry",
]
