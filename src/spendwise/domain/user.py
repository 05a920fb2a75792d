"""User domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from spendwise.database.base import Database
from spendwise.domain.aggregation import AggregationService
from spendwise.domain.entities import (
    TransactionFilter,
    TransactionType,
    User as UserEntity,
    UserStats,
)
from spendwise.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_user_email,
    user_not_found,
)
from spendwise.utils.amount_parser import has_cent_precision

logger = logging.getLogger(__name__)

TOP_CATEGORY_LIMIT = 5


def clean_name(name: str) -> str:
    """Trim a display name, rejecting blank ones."""
    name = (name or "").strip()
    if not name:
        raise ValidationError("Name is required")
    return name


def clean_email(email: str) -> str:
    """Normalize an email address to trimmed lower case."""
    email = (email or "").strip().lower()
    if not email or "@" not in email:
        raise ValidationError(f"Invalid email address '{email}'")
    return email


def validate_budget(budget: Decimal) -> None:
    """Raise ValidationError unless budget is a non-negative number of cents."""
    if budget < 0:
        raise ValidationError(f"Budget must not be negative, got {budget}")
    if not has_cent_precision(budget):
        raise ValidationError(f"Budget cannot have more than 2 decimal places, got {budget}")


class UserService:
    """Service for managing users and their budget settings."""

    def __init__(self, db: Database):
        """Initialize user service.

        Args:
            db: Database instance
        """
        self.db = db
        self.aggregation = AggregationService(db)

    def create_user(
        self,
        name: str,
        email: str,
        budget: Decimal = Decimal("0"),
        email_notifications: bool = True,
    ) -> int:
        """Create a user.

        Args:
            name: Display name
            email: Unique email address
            budget: Monthly budget, 0 meaning no budget
            email_notifications: Whether budget alerts are emailed

        Returns:
            User ID

        Raises:
            ValidationError: If name or email is empty or budget is invalid
            ConflictError: If the email is already registered
        """
        name = clean_name(name)
        email = clean_email(email)
        validate_budget(budget)

        if self.db.get_user_by_email(email) is not None:
            raise ConflictError(duplicate_user_email(email))

        return self.db.create_user(
            name=name,
            email=email,
            budget=budget,
            email_notifications=email_notifications,
        )

    def get_user(self, user_id: int) -> Optional[UserEntity]:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity or None if not found
        """
        return self.db.get_user(user_id)

    def require_user(self, user_id: int) -> UserEntity:
        """Get user by ID, raising NotFoundError when missing."""
        user = self.db.get_user(user_id)
        if user is None:
            raise NotFoundError(user_not_found(user_id))
        return user

    def list_users(self) -> list[UserEntity]:
        """List all users."""
        return self.db.list_users()

    def update_profile(
        self,
        user_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> None:
        """Change a user's name and/or email address.

        Raises:
            ValidationError: If a provided field is blank or malformed
            NotFoundError: If user doesn't exist
            ConflictError: If the email belongs to another user
        """
        if name is not None:
            name = clean_name(name)
        if email is not None:
            email = clean_email(email)
        self.require_user(user_id)

        if email is not None:
            owner = self.db.get_user_by_email(email)
            if owner is not None and owner.id != user_id:
                raise ConflictError(duplicate_user_email(email))

        self.db.update_user(user_id, name=name, email=email)

    def delete_user(self, user_id: int) -> int:
        """Delete a user together with their whole ledger.

        Returns:
            Number of transactions removed

        Raises:
            NotFoundError: If user doesn't exist
        """
        self.require_user(user_id)
        removed = self.db.count_transactions(TransactionFilter(user_id=user_id))
        self.db.delete_user(user_id)
        logger.info("Deleted user %s and %d transactions", user_id, removed)
        return removed

    def set_budget(self, user_id: int, budget: Decimal) -> None:
        """Set a user's monthly budget.

        Raises:
            ValidationError: If budget is negative or finer than a cent
            NotFoundError: If user doesn't exist
        """
        validate_budget(budget)
        self.require_user(user_id)
        self.db.update_user_budget(user_id, budget)

    def set_email_notifications(self, user_id: int, enabled: bool) -> None:
        """Enable or disable budget alert emails for a user."""
        self.require_user(user_id)
        self.db.update_user_preferences(user_id, enabled)

    def get_user_stats(self, user_id: int, now: date) -> UserStats:
        """Summarize a user's whole ledger.

        Args:
            user_id: User ID
            now: Reference date for the account age

        Returns:
            UserStats with per-type totals and the five largest expense categories

        Raises:
            NotFoundError: If user doesn't exist
            DependencyUnavailableError: If the ledger cannot be read
        """
        user = self.require_user(user_id)
        income = self.aggregation.aggregate(user_id, type=TransactionType.INCOME)
        expense = self.aggregation.aggregate(user_id, type=TransactionType.EXPENSE)
        rollups = self.aggregation.aggregate_by_category(user_id, type=TransactionType.EXPENSE)

        return UserStats(
            user_id=user_id,
            total_transactions=income.count + expense.count,
            income=income,
            expense=expense,
            top_categories=tuple(rollups[:TOP_CATEGORY_LIMIT]),
            account_age_days=max(0, (now - user.created_at.date()).days),
            join_date=user.created_at,
        )
