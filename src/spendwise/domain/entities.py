"""Domain model entities for spendwise.

These are pure data classes representing business concepts, independent of
database schema. Derived entities (snapshots, trend points, rollups and
summaries) are computed on every request and never persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Category(Enum):
    """Closed set of transaction categories."""

    FOOD = "Food"
    TRAVEL = "Travel"
    RENT = "Rent"
    SHOPPING = "Shopping"
    BILLS = "Bills"
    HEALTHCARE = "Healthcare"
    ENTERTAINMENT = "Entertainment"
    EDUCATION = "Education"
    SALARY = "Salary"
    FREELANCE = "Freelance"
    INVESTMENT = "Investment"
    OTHERS = "Others"


class TransactionSort(Enum):
    """Ordering for ledger reads."""

    NEWEST_FIRST = "newest"
    OLDEST_FIRST = "oldest"


class DashboardPeriod(Enum):
    """Window used by dashboard statistics."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class RecommendationType(Enum):
    """Kinds of budget recommendation."""

    INCREASE_BUDGET = "increase_budget"
    OPTIMIZE_BUDGET = "optimize_budget"


@dataclass(frozen=True)
class User:
    """User domain entity (the subset the analytics need)."""

    id: int
    name: str
    email: str
    budget: Decimal
    email_notifications: bool
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    user_id: int
    type: TransactionType
    amount: Decimal
    category: Category
    description: str
    date: date
    created_at: datetime


@dataclass(frozen=True)
class TransactionFilter:
    """Filter predicate for ledger queries.

    Date bounds are inclusive. ``text_search`` is a case-insensitive
    substring match on the description.
    """

    user_id: int
    type: Optional[TransactionType] = None
    category: Optional[Category] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    text_search: Optional[str] = None


@dataclass(frozen=True)
class AggregateResult:
    """Sum and count over a set of matching transactions."""

    total: Decimal
    count: int


@dataclass(frozen=True)
class CategoryRollup:
    """Total and count for one category."""

    category: Category
    total: Decimal
    count: int


@dataclass(frozen=True)
class UserStats:
    """Lifetime ledger statistics for one user."""

    user_id: int
    total_transactions: int
    income: AggregateResult
    expense: AggregateResult
    top_categories: tuple[CategoryRollup, ...]
    account_age_days: int
    join_date: datetime


@dataclass(frozen=True)
class BudgetSnapshot:
    """Budget usage for the calendar month containing a reference date.

    ``budget_usage`` is clamped to 100 for display; ``raw_budget_usage``
    keeps the unclamped percentage.
    """

    budget: Decimal
    current_expenses: Decimal
    remaining: Decimal
    budget_usage: Decimal
    raw_budget_usage: Decimal
    is_over_budget: bool
    period_start: date
    period_end: date


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Budget against expenses for one calendar month."""

    month_key: str
    budget: Decimal
    expenses: Decimal
    savings: Decimal


@dataclass(frozen=True)
class Recommendation:
    """Rule-based budget recommendation."""

    type: RecommendationType
    suggested_budget: int
    message: str


@dataclass(frozen=True)
class AnalyticsSummary:
    """Scalar statistics reduced from a trend series."""

    avg_monthly_expense: Decimal
    total_savings: Decimal
    budget_adherence: Decimal
    recommendations: tuple[Recommendation, ...] = ()


@dataclass(frozen=True)
class BudgetAnalytics:
    """Trend series together with its summary."""

    trend: tuple[MonthlyTrendPoint, ...]
    summary: AnalyticsSummary


@dataclass(frozen=True)
class PeriodSummary:
    """Income and expense totals for a dashboard window."""

    income: Decimal
    expense: Decimal
    balance: Decimal
    transaction_count: int


@dataclass(frozen=True)
class MonthlyTypeTotal:
    """Total for one (month number, transaction type) pair."""

    month: int
    type: TransactionType
    total: Decimal


@dataclass(frozen=True)
class DashboardStats:
    """Everything the dashboard shows for one period."""

    period: DashboardPeriod
    start_date: date
    end_date: date
    summary: PeriodSummary
    category_rollups: tuple[CategoryRollup, ...]
    monthly_trend: tuple[MonthlyTypeTotal, ...]
    recent_transactions: tuple[Transaction, ...]


@dataclass(frozen=True)
class NotificationRequest:
    """Dispatch request handed to the messaging collaborator."""

    recipient_email: str
    recipient_name: str
    subject: str
    body_fields: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class TransactionPage:
    """One page of a transaction listing."""

    transactions: tuple[Transaction, ...]
    current: int
    pages: int
    total: int
