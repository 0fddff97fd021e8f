"""API routes."""

from payroll_report.api.routes.health import router as health_router
from payroll_report.api.routes.report import router as report_router

__all__ = ["health_router", "report_router"]
