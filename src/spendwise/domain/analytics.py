"""Analytics summarizer and budget recommendations."""

import logging
import math
from datetime import date
from decimal import Decimal
from typing import Sequence

from spendwise.database.base import Database
from spendwise.domain.entities import (
    AnalyticsSummary,
    BudgetAnalytics,
    MonthlyTrendPoint,
    Recommendation,
    RecommendationType,
)
from spendwise.domain.errors import InvalidArgumentError, NotFoundError, user_not_found
from spendwise.domain.trend import DEFAULT_TREND_MONTHS, TrendService

logger = logging.getLogger(__name__)

INCREASE_HEADROOM = Decimal("1.1")
OPTIMIZE_THRESHOLD = Decimal("1.5")
OPTIMIZE_TARGET = Decimal("1.2")


def recommend(avg_monthly_expense: Decimal, budget: Decimal) -> list[Recommendation]:
    """Apply the recommendation rules.

    Each rule is checked on its own, so zero, one or both may fire.
    """
    recommendations = []

    if avg_monthly_expense > budget:
        target = math.ceil(avg_monthly_expense * INCREASE_HEADROOM)
        recommendations.append(
            Recommendation(
                type=RecommendationType.INCREASE_BUDGET,
                suggested_budget=target,
                message=(
                    f"Consider increasing your budget to ${target} "
                    "based on your spending pattern"
                ),
            )
        )

    if budget > avg_monthly_expense * OPTIMIZE_THRESHOLD:
        target = math.ceil(avg_monthly_expense * OPTIMIZE_TARGET)
        recommendations.append(
            Recommendation(
                type=RecommendationType.OPTIMIZE_BUDGET,
                suggested_budget=target,
                message=(
                    f"You could optimize your budget to ${target} "
                    "and allocate more to savings"
                ),
            )
        )

    return recommendations


def summarize(points: Sequence[MonthlyTrendPoint], budget: Decimal) -> AnalyticsSummary:
    """Reduce a trend series into scalar statistics.

    A month counts towards adherence when its expenses do not exceed the
    budget.

    Raises:
        InvalidArgumentError: If points is empty
    """
    if not points:
        raise InvalidArgumentError("At least one trend point is required")

    count = Decimal(len(points))
    avg_monthly_expense = sum((p.expenses for p in points), Decimal("0")) / count
    total_savings = sum((p.savings for p in points), Decimal("0"))
    adherent = sum(1 for p in points if p.expenses <= budget)

    return AnalyticsSummary(
        avg_monthly_expense=avg_monthly_expense,
        total_savings=total_savings,
        budget_adherence=Decimal(adherent) / count * Decimal("100"),
        recommendations=tuple(recommend(avg_monthly_expense, budget)),
    )


class AnalyticsService:
    """Service combining trend building and summarizing for a user."""

    def __init__(self, db: Database):
        """Initialize analytics service.

        Args:
            db: Database instance
        """
        self.db = db
        self.trend_service = TrendService(db)

    def get_analytics(
        self, user_id: int, now: date, months: int = DEFAULT_TREND_MONTHS
    ) -> BudgetAnalytics:
        """Build the trend for a user's current budget and summarize it.

        Raises:
            NotFoundError: If user doesn't exist
            InvalidArgumentError: If months is not positive
            DependencyUnavailableError: If the ledger cannot be read
        """
        user = self.db.get_user(user_id)
        if user is None:
            raise NotFoundError(user_not_found(user_id))

        trend = self.trend_service.build_trend(user_id, user.budget, now, months=months)
        summary = summarize(trend, user.budget)
        logger.debug(
            "Analytics for user %s over %d months: %d recommendation(s)",
            user_id,
            months,
            len(summary.recommendations),
        )
        return BudgetAnalytics(trend=tuple(trend), summary=summary)
