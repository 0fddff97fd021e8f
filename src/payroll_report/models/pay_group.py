"""Pay group reference data."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from payroll_report.models.base import Base


class PayGroup(Base):
    """Hourly rate class. Seeded at startup, read-only afterwards."""

    __tablename__ = "pay_group"

    pay_group_id: Mapped[str] = mapped_column(String(191), primary_key=True)
    hourly_rate: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
