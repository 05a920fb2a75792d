"""Monthly trend builder."""

from datetime import date
from decimal import Decimal

from spendwise.database.base import Database
from spendwise.domain.aggregation import AggregationService
from spendwise.domain.entities import MonthlyTrendPoint, TransactionType
from spendwise.domain.errors import InvalidArgumentError
from spendwise.utils.date_parser import month_bounds, month_key

DEFAULT_TREND_MONTHS = 6


def trend_point(month_start: date, budget: Decimal, expenses: Decimal) -> MonthlyTrendPoint:
    """Build one trend point; savings never go below zero."""
    return MonthlyTrendPoint(
        month_key=month_key(month_start),
        budget=budget,
        expenses=expenses,
        savings=max(Decimal("0"), budget - expenses),
    )


class TrendService:
    """Service building budget-vs-expense series over calendar months."""

    def __init__(self, db: Database):
        """Initialize trend service.

        Args:
            db: Database instance
        """
        self.db = db
        self.aggregation = AggregationService(db)

    def build_trend(
        self,
        user_id: int,
        budget: Decimal,
        now: date,
        months: int = DEFAULT_TREND_MONTHS,
    ) -> list[MonthlyTrendPoint]:
        """Build the trend for the ``months`` calendar months ending with the month of ``now``.

        The current budget is applied to every month, including past ones.

        Args:
            user_id: Owning user
            budget: Budget to compare each month against
            now: Reference date
            months: Number of months, oldest first

        Returns:
            List of MonthlyTrendPoint with strictly increasing month keys

        Raises:
            InvalidArgumentError: If months is negative
            DependencyUnavailableError: If the ledger cannot be read
        """
        if months < 0:
            raise InvalidArgumentError(f"months must not be negative, got {months}")

        points = []
        for months_back in range(months - 1, -1, -1):
            month_start, month_end = month_bounds(now, months_back)
            expenses = self.aggregation.aggregate(
                user_id,
                date_from=month_start,
                date_to=month_end,
                type=TransactionType.EXPENSE,
            ).total
            points.append(trend_point(month_start, budget, expenses))
        return points
