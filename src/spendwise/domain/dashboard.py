"""Dashboard statistics domain service."""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable

from spendwise.database.base import Database
from spendwise.domain.aggregation import AggregationService, aggregate, aggregate_by_category
from spendwise.domain.entities import (
    DashboardPeriod,
    DashboardStats,
    MonthlyTypeTotal,
    PeriodSummary,
    Transaction,
    TransactionFilter,
    TransactionSort,
    TransactionType,
)
from spendwise.domain.errors import InvalidArgumentError, NotFoundError, user_not_found
from spendwise.utils.date_parser import get_period_range

RECENT_TRANSACTION_LIMIT = 5


def monthly_type_totals(transactions: Iterable[Transaction]) -> list[MonthlyTypeTotal]:
    """Total transactions per (month number, type), ascending by month then type."""
    totals: dict[tuple[int, TransactionType], Decimal] = defaultdict(Decimal)
    for txn in transactions:
        totals[(txn.date.month, txn.type)] += txn.amount

    return [
        MonthlyTypeTotal(month=month, type=txn_type, total=total)
        for (month, txn_type), total in sorted(
            totals.items(), key=lambda item: (item[0][0], item[0][1].value)
        )
    ]


class DashboardService:
    """Service assembling dashboard statistics for a user."""

    def __init__(self, db: Database):
        """Initialize dashboard service.

        Args:
            db: Database instance
        """
        self.db = db
        self.aggregation = AggregationService(db)

    def get_dashboard_stats(
        self, user_id: int, now: date, period: DashboardPeriod | str = DashboardPeriod.MONTH
    ) -> DashboardStats:
        """Summarize a user's ledger for the week, month or year ending at ``now``.

        Args:
            user_id: Owning user
            now: Reference date, inclusive end of the window
            period: week, month or year

        Returns:
            DashboardStats with totals, expense rollups, the year's monthly
            totals and the most recent transactions

        Raises:
            InvalidArgumentError: If period is not recognized
            NotFoundError: If user doesn't exist
            DependencyUnavailableError: If the ledger cannot be read
        """
        try:
            period = DashboardPeriod(period)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown period: '{period}'. Supported periods: week, month, year"
            )

        if self.db.get_user(user_id) is None:
            raise NotFoundError(user_not_found(user_id))

        start_date, end_date = get_period_range(period.value, now)
        window = self.aggregation.fetch(user_id, date_from=start_date, date_to=end_date)

        income = aggregate(window, type=TransactionType.INCOME).total
        expense = aggregate(window, type=TransactionType.EXPENSE).total
        summary = PeriodSummary(
            income=income,
            expense=expense,
            balance=income - expense,
            transaction_count=len(window),
        )

        year_start = end_date.replace(month=1, day=1)
        year_transactions = self.aggregation.fetch(user_id, date_from=year_start, date_to=end_date)

        recent = self.db.find_transactions(
            TransactionFilter(user_id=user_id),
            sort=TransactionSort.NEWEST_FIRST,
            limit=RECENT_TRANSACTION_LIMIT,
        )

        return DashboardStats(
            period=period,
            start_date=start_date,
            end_date=end_date,
            summary=summary,
            category_rollups=tuple(aggregate_by_category(window, type=TransactionType.EXPENSE)),
            monthly_trend=tuple(monthly_type_totals(year_transactions)),
            recent_transactions=tuple(recent),
        )
