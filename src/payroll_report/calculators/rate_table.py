"""Pay group rate lookup."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_report.models import PayGroup

logger = logging.getLogger(__name__)

ZERO_RATE = Decimal("0")

# Reference data created at startup.
DEFAULT_PAY_GROUPS: tuple[tuple[str, Decimal], ...] = (
    ("A", Decimal("20.00")),
    ("B", Decimal("30.00")),
)


@dataclass(frozen=True)
class RateTable:
    """Immutable pay group -> hourly rate mapping.

    Unknown pay groups resolve to a zero rate instead of failing, so a row
    with an unrecognised job group is stored but contributes nothing.
    """

    rates: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def rate_for(self, pay_group: str) -> Decimal:
        """Get the hourly rate for a pay group (zero when unknown)."""
        rate = self.rates.get(pay_group)
        if rate is None:
            logger.warning("No hourly rate for pay group %r, using 0", pay_group)
            return ZERO_RATE
        return rate

    def amount_for(self, pay_group: str, hours: Decimal) -> Decimal:
        """Compute the amount earned for hours worked under a pay group."""
        return self.rate_for(pay_group) * hours

    @classmethod
    async def load(cls, session: AsyncSession) -> RateTable:
        """Load all pay groups from the database."""
        result = await session.execute(select(PayGroup))
        return cls({group.pay_group_id: group.hourly_rate for group in result.scalars()})


async def seed_pay_groups(
    session: AsyncSession,
    groups: tuple[tuple[str, Decimal], ...] = DEFAULT_PAY_GROUPS,
) -> int:
    """Create the reference pay groups that do not exist yet.

    Existing rows are left untouched. Returns the number of groups created.
    """
    created = 0
    for pay_group_id, hourly_rate in groups:
        existing = await session.get(PayGroup, pay_group_id)
        if existing is not None:
            continue
        session.add(PayGroup(pay_group_id=pay_group_id, hourly_rate=hourly_rate))
        created += 1
    await session.commit()
    logger.info("Seeded %d pay group(s)", created)
    return created
