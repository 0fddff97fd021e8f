"""Wire models for the payroll report."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class PayPeriodOut(BaseModel):
    """Pay period rendered with ISO calendar dates."""

    model_config = ConfigDict(populate_by_name=True)

    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")

    @field_serializer("start_date", "end_date")
    def serialize_date(self, value: date) -> str:
        return value.strftime("%Y-%m-%d")


class EmployeeReportOut(BaseModel):
    """One employee's total for one pay period."""

    model_config = ConfigDict(populate_by_name=True)

    employee_id: int = Field(alias="employeeID")
    pay_period: PayPeriodOut = Field(alias="payPeriod")
    amount_paid: str = Field(alias="amountPaid")


class PayrollReport(BaseModel):
    """Collection of employee reports."""

    model_config = ConfigDict(populate_by_name=True)

    employee_reports: list[EmployeeReportOut] = Field(
        default_factory=list, alias="employeeReports"
    )


class PayrollReportResponse(BaseModel):
    """Response for the report endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    payroll_report: PayrollReport = Field(alias="payrollReport")
