"""Aggregation engine.

Sums, counts and category rollups over a date-bounded subset of a ledger.
The module-level functions reduce an in-memory iterable of transactions;
``AggregationService`` answers the same questions against a Database.
Empty match sets give zero results, never errors.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from spendwise.database.base import Database
from spendwise.domain.entities import (
    AggregateResult,
    Category,
    CategoryRollup,
    Transaction,
    TransactionFilter,
    TransactionSort,
    TransactionType,
)
from spendwise.domain.errors import InvalidArgumentError, invalid_date_range


def validate_date_range(date_from: Optional[date], date_to: Optional[date]) -> None:
    """Raise InvalidArgumentError when ``date_from`` is after ``date_to``."""
    if date_from is not None and date_to is not None and date_from > date_to:
        raise InvalidArgumentError(invalid_date_range(date_from, date_to))


def matches(
    txn: Transaction,
    type: Optional[TransactionType] = None,
    category: Optional[Category] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> bool:
    """Check a transaction against an inclusive date window and optional filters."""
    if type is not None and txn.type != type:
        return False
    if category is not None and txn.category != category:
        return False
    if date_from is not None and txn.date < date_from:
        return False
    if date_to is not None and txn.date > date_to:
        return False
    return True


def aggregate(
    transactions: Iterable[Transaction],
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    type: Optional[TransactionType] = None,
    category: Optional[Category] = None,
) -> AggregateResult:
    """Sum amounts and count records of the matching transactions.

    Raises:
        InvalidArgumentError: If date_from is after date_to
    """
    validate_date_range(date_from, date_to)

    total = Decimal("0")
    count = 0
    for txn in transactions:
        if matches(txn, type, category, date_from, date_to):
            total += txn.amount
            count += 1
    return AggregateResult(total=total, count=count)


def sort_rollups(rollups: Iterable[CategoryRollup]) -> list[CategoryRollup]:
    """Order rollups by total descending, ties by category name ascending."""
    return sorted(rollups, key=lambda r: (-r.total, r.category.value))


def aggregate_by_category(
    transactions: Iterable[Transaction],
    type: Optional[TransactionType] = TransactionType.EXPENSE,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> list[CategoryRollup]:
    """Group matching transactions by category.

    Only categories with at least one matching transaction appear.

    Raises:
        InvalidArgumentError: If date_from is after date_to
    """
    validate_date_range(date_from, date_to)

    groups: dict[Category, dict] = defaultdict(lambda: {"total": Decimal("0"), "count": 0})
    for txn in transactions:
        if matches(txn, type, None, date_from, date_to):
            groups[txn.category]["total"] += txn.amount
            groups[txn.category]["count"] += 1

    return sort_rollups(
        CategoryRollup(category=category, total=data["total"], count=data["count"])
        for category, data in groups.items()
    )


class AggregationService:
    """Runs the aggregation contract against one user's ledger."""

    def __init__(self, db: Database):
        """Initialize aggregation service.

        Args:
            db: Database instance
        """
        self.db = db

    def aggregate(
        self,
        user_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        type: Optional[TransactionType] = None,
        category: Optional[Category] = None,
    ) -> AggregateResult:
        """Sum and count a user's transactions in an inclusive date window.

        Args:
            user_id: Owning user
            date_from: Inclusive start date
            date_to: Inclusive end date
            type: Optional transaction type filter
            category: Optional category filter

        Returns:
            AggregateResult, zero when nothing matches

        Raises:
            InvalidArgumentError: If date_from is after date_to
            DependencyUnavailableError: If the ledger cannot be read
        """
        validate_date_range(date_from, date_to)
        ledger_filter = TransactionFilter(
            user_id=user_id,
            type=type,
            category=category,
            date_from=date_from,
            date_to=date_to,
        )
        return AggregateResult(
            total=self.db.aggregate_sum(ledger_filter),
            count=self.db.count_transactions(ledger_filter),
        )

    def aggregate_by_category(
        self,
        user_id: int,
        type: Optional[TransactionType] = TransactionType.EXPENSE,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> list[CategoryRollup]:
        """Roll up a user's transactions by category, largest total first."""
        validate_date_range(date_from, date_to)
        transactions = self.fetch(user_id, date_from=date_from, date_to=date_to, type=type)
        return aggregate_by_category(transactions, type=type)

    def fetch(
        self,
        user_id: int,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        type: Optional[TransactionType] = None,
    ) -> list[Transaction]:
        """Fetch a user's transactions in a window, oldest first."""
        validate_date_range(date_from, date_to)
        return self.db.find_transactions(
            TransactionFilter(user_id=user_id, type=type, date_from=date_from, date_to=date_to),
            sort=TransactionSort.OLDEST_FIRST,
        )
