"""Transaction domain service."""

import logging
import math
from datetime import date
from decimal import Decimal
from typing import Optional

from spendwise.database.base import Database
from spendwise.domain.aggregation import validate_date_range
from spendwise.domain.alerts import AlertService
from spendwise.domain.entities import (
    Category,
    Transaction as TransactionEntity,
    TransactionFilter,
    TransactionPage,
    TransactionSort,
    TransactionType,
)
from spendwise.domain.errors import (
    NotFoundError,
    ValidationError,
    transaction_not_found,
    user_not_found,
)
from spendwise.utils.amount_parser import has_cent_precision

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 200


def _today() -> date:
    return date.today()


def validate_amount(amount: Decimal) -> None:
    """Raise ValidationError unless amount is a positive number of cents."""
    if amount <= 0:
        raise ValidationError(f"Amount must be greater than 0, got {amount}")
    if not has_cent_precision(amount):
        raise ValidationError(f"Amount cannot have more than 2 decimal places, got {amount}")


def clean_description(description: str) -> str:
    """Trim a description and check its length."""
    description = (description or "").strip()
    if not description:
        raise ValidationError("Description is required")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
        )
    return description


def parse_type(value: TransactionType | str) -> TransactionType:
    """Resolve a transaction type from an enum or its string value."""
    try:
        return TransactionType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in TransactionType)
        raise ValidationError(f"Invalid transaction type '{value}'. Allowed: {allowed}")


def parse_category(value: Category | str) -> Category:
    """Resolve a category from an enum or its name, case-insensitively."""
    if isinstance(value, Category):
        return value
    for category in Category:
        if category.value.lower() == str(value).strip().lower():
            return category
    allowed = ", ".join(c.value for c in Category)
    raise ValidationError(f"Invalid category '{value}'. Allowed: {allowed}")


class TransactionService:
    """Service for recording and listing a user's transactions."""

    def __init__(self, db: Database, alert_service: Optional[AlertService] = None):
        """Initialize transaction service.

        Args:
            db: Database instance
            alert_service: Optional alert hook run after expenses are created
        """
        self.db = db
        self.alert_service = alert_service

    def create_transaction(
        self,
        user_id: int,
        type: TransactionType | str,
        amount: Decimal,
        category: Category | str,
        description: str,
        date: date,
        now: Optional[date] = None,
    ) -> int:
        """Create a transaction.

        Expenses are followed by a budget alert check for the calendar month
        of ``now`` (today when omitted), whatever the transaction date. The
        check never fails the write.

        Args:
            user_id: Owning user
            type: income or expense
            amount: Positive amount
            category: Category
            description: Free text, at most 200 characters
            date: Economic date of the transaction
            now: Reference date for the alert check, defaults to today

        Returns:
            Transaction ID

        Raises:
            NotFoundError: If user doesn't exist
            ValidationError: If any field is invalid
        """
        txn_type = parse_type(type)
        txn_category = parse_category(category)
        validate_amount(amount)
        description = clean_description(description)

        if self.db.get_user(user_id) is None:
            raise NotFoundError(user_not_found(user_id))

        transaction_id = self.db.create_transaction(
            user_id=user_id,
            type=txn_type,
            amount=amount,
            category=txn_category,
            description=description,
            date=date,
        )
        logger.debug("Created %s transaction %s for user %s", txn_type.value, transaction_id, user_id)

        if txn_type == TransactionType.EXPENSE and self.alert_service is not None:
            self.alert_service.on_expense_created(
                user_id, amount, now if now is not None else _today()
            )

        return transaction_id

    def get_transaction(self, user_id: int, transaction_id: int) -> TransactionEntity:
        """Get a transaction owned by a user.

        Raises:
            NotFoundError: If the transaction doesn't exist or belongs to another user
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None or txn.user_id != user_id:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        user_id: int,
        transaction_id: int,
        type: Optional[TransactionType | str] = None,
        amount: Optional[Decimal] = None,
        category: Optional[Category | str] = None,
        description: Optional[str] = None,
        date: Optional[date] = None,
    ) -> None:
        """Update the provided fields of a user's transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist or belongs to another user
            ValidationError: If any provided field is invalid
        """
        self.get_transaction(user_id, transaction_id)

        if amount is not None:
            validate_amount(amount)
        if description is not None:
            description = clean_description(description)

        self.db.update_transaction(
            transaction_id,
            type=parse_type(type) if type is not None else None,
            amount=amount,
            category=parse_category(category) if category is not None else None,
            description=description,
            date=date,
        )

    def delete_transaction(self, user_id: int, transaction_id: int) -> None:
        """Delete a user's transaction permanently.

        Raises:
            NotFoundError: If the transaction doesn't exist or belongs to another user
        """
        self.get_transaction(user_id, transaction_id)
        self.db.delete_transaction(transaction_id)

    def list_transactions(
        self,
        user_id: int,
        type: Optional[TransactionType | str] = None,
        category: Optional[Category | str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> TransactionPage:
        """List a user's transactions, newest first, one page at a time.

        Raises:
            ValidationError: If page or limit is not positive or a filter is invalid
        """
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be positive")
        validate_date_range(start_date, end_date)

        ledger_filter = TransactionFilter(
            user_id=user_id,
            type=parse_type(type) if type is not None else None,
            category=parse_category(category) if category is not None else None,
            date_from=start_date,
            date_to=end_date,
            text_search=search or None,
        )
        transactions = self.db.find_transactions(
            ledger_filter,
            sort=TransactionSort.NEWEST_FIRST,
            limit=limit,
            offset=(page - 1) * limit,
        )
        total = self.db.count_transactions(ledger_filter)
        return TransactionPage(
            transactions=tuple(transactions),
            current=page,
            pages=math.ceil(total / limit),
            total=total,
        )
