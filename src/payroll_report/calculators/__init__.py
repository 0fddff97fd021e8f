"""Pay period and rate calculations."""

from payroll_report.calculators.pay_period import PayPeriodWindow, resolve_pay_period
from payroll_report.calculators.rate_table import DEFAULT_PAY_GROUPS, RateTable, seed_pay_groups

__all__ = [
    "PayPeriodWindow",
    "resolve_pay_period",
    "DEFAULT_PAY_GROUPS",
    "RateTable",
    "seed_pay_groups",
]
