"""Budget threshold alerts.

Alerts are advisory: they are evaluated after an expense is written and
their failure never affects the write. There is no de-duplication, so every
qualifying expense triggers a new alert.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from spendwise.database.base import Database
from spendwise.domain.budget import BudgetService, usage_percent
from spendwise.domain.entities import NotificationRequest, User
from spendwise.domain.errors import (
    DependencyUnavailableError,
    NotFoundError,
    NotificationDispatchFailedError,
    user_not_found,
)
from spendwise.notifications.base import Notifier, budget_alert_subject

logger = logging.getLogger(__name__)

ALERT_THRESHOLD = Decimal("80")


def should_alert(user: User, raw_usage: Decimal) -> bool:
    """Decide whether a usage percentage warrants an alert for a user."""
    return user.budget > 0 and user.email_notifications and raw_usage >= ALERT_THRESHOLD


def build_alert(user: User, raw_usage: Decimal, current_expenses: Decimal) -> NotificationRequest:
    """Build the dispatch request for a budget alert."""
    return NotificationRequest(
        recipient_email=user.email,
        recipient_name=user.name,
        subject=budget_alert_subject(raw_usage),
        body_fields={
            "usage_percent": raw_usage,
            "current_expenses": current_expenses,
            "budget": user.budget,
        },
    )


class AlertService:
    """Evaluates budget usage after expenses and dispatches alerts."""

    def __init__(self, db: Database, notifier: Notifier):
        """Initialize alert service.

        Args:
            db: Database instance
            notifier: Messaging collaborator
        """
        self.db = db
        self.notifier = notifier
        self.budget_service = BudgetService(db)

    def evaluate(
        self, user_id: int, new_expense_amount: Decimal, now: date
    ) -> Optional[NotificationRequest]:
        """Check the current month's usage and send an alert when it crosses the threshold.

        The just-written expense must already be in the ledger; its amount is
        only used for logging.

        Returns:
            The dispatched request, or None when no alert was sent

        Raises:
            NotFoundError: If user doesn't exist
            DependencyUnavailableError: If the ledger cannot be read
        """
        user = self.db.get_user(user_id)
        if user is None:
            raise NotFoundError(user_not_found(user_id))
        if user.budget <= 0 or not user.email_notifications:
            logger.debug("Alerts disabled for user %s", user_id)
            return None

        current_expenses = self.budget_service.current_month_expenses(user_id, now)
        raw_usage = usage_percent(current_expenses, user.budget)
        if not should_alert(user, raw_usage):
            logger.debug("User %s at %.1f%% of budget, no alert", user_id, raw_usage)
            return None

        request = build_alert(user, raw_usage, current_expenses)
        logger.info(
            "User %s at %.1f%% of budget after expense of %s, sending alert",
            user_id,
            raw_usage,
            new_expense_amount,
        )
        try:
            self.notifier.send(request)
        except NotificationDispatchFailedError:
            logger.exception("Budget alert for user %s could not be delivered", user_id)
            return None
        return request

    def on_expense_created(
        self, user_id: int, amount: Decimal, now: date
    ) -> Optional[NotificationRequest]:
        """Hook run after an expense transaction is written.

        Ledger failures are logged rather than raised, since the write has
        already succeeded.
        """
        try:
            return self.evaluate(user_id, amount, now)
        except DependencyUnavailableError:
            logger.exception("Budget alert for user %s skipped: ledger unavailable", user_id)
            return None
