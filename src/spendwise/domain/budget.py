"""Budget snapshot calculator."""

from datetime import date
from decimal import Decimal

from spendwise.database.base import Database
from spendwise.domain.aggregation import AggregationService
from spendwise.domain.entities import BudgetSnapshot, TransactionType
from spendwise.domain.errors import InvalidArgumentError, NotFoundError, user_not_found
from spendwise.utils.date_parser import month_bounds

HUNDRED = Decimal("100")


def usage_percent(current_expenses: Decimal, budget: Decimal) -> Decimal:
    """Return expenses as an unclamped percentage of budget (0 when no budget is set)."""
    if budget <= 0:
        return Decimal("0")
    return current_expenses / budget * HUNDRED


def calculate_snapshot(budget: Decimal, current_expenses: Decimal, now: date) -> BudgetSnapshot:
    """Build a snapshot for the calendar month containing ``now``.

    Args:
        budget: Configured monthly budget, 0 meaning no budget
        current_expenses: Expense total for that month
        now: Reference date

    Raises:
        InvalidArgumentError: If budget is negative
    """
    if budget < 0:
        raise InvalidArgumentError(f"Budget must not be negative, got {budget}")

    period_start, period_end = month_bounds(now)
    raw_usage = usage_percent(current_expenses, budget)
    return BudgetSnapshot(
        budget=budget,
        current_expenses=current_expenses,
        remaining=max(Decimal("0"), budget - current_expenses),
        budget_usage=min(HUNDRED, raw_usage),
        raw_budget_usage=raw_usage,
        is_over_budget=current_expenses > budget,
        period_start=period_start,
        period_end=period_end,
    )


class BudgetService:
    """Service computing budget snapshots from the ledger."""

    def __init__(self, db: Database):
        """Initialize budget service.

        Args:
            db: Database instance
        """
        self.db = db
        self.aggregation = AggregationService(db)

    def current_month_expenses(self, user_id: int, now: date) -> Decimal:
        """Total expenses of a user in the calendar month containing ``now``."""
        period_start, period_end = month_bounds(now)
        return self.aggregation.aggregate(
            user_id,
            date_from=period_start,
            date_to=period_end,
            type=TransactionType.EXPENSE,
        ).total

    def snapshot(self, user_id: int, budget: Decimal, now: date) -> BudgetSnapshot:
        """Compute the snapshot for a given budget against a user's ledger."""
        return calculate_snapshot(budget, self.current_month_expenses(user_id, now), now)

    def get_snapshot(self, user_id: int, now: date) -> BudgetSnapshot:
        """Compute the snapshot for a user's configured budget.

        Raises:
            NotFoundError: If user doesn't exist
            DependencyUnavailableError: If the ledger cannot be read
        """
        user = self.db.get_user(user_id)
        if user is None:
            raise NotFoundError(user_not_found(user_id))
        return self.snapshot(user_id, user.budget, now)
