"""Abstract ledger interface."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from spendwise.domain.entities import (
    Category,
    Transaction,
    TransactionFilter,
    TransactionSort,
    TransactionType,
    User,
)


class Database(ABC):
    """Abstract database interface for spendwise.

    Read methods raise DependencyUnavailableError when the underlying store
    cannot be queried.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(
        self,
        name: str,
        email: str,
        budget: Decimal = Decimal("0"),
        email_notifications: bool = True,
    ) -> int:
        """Create a user. Returns user ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users."""
        pass

    @abstractmethod
    def update_user_budget(self, user_id: int, budget: Decimal) -> None:
        """Set the monthly budget of a user."""
        pass

    @abstractmethod
    def update_user_preferences(self, user_id: int, email_notifications: bool) -> None:
        """Set the notification preference of a user."""
        pass

    @abstractmethod
    def update_user(
        self,
        user_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> None:
        """Update the given profile fields of a user."""
        pass

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Delete a user and all of their transactions permanently."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        user_id: int,
        type: TransactionType,
        amount: Decimal,
        category: Category,
        description: str,
        date: date,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        type: Optional[TransactionType] = None,
        amount: Optional[Decimal] = None,
        category: Optional[Category] = None,
        description: Optional[str] = None,
        date: Optional[date] = None,
    ) -> None:
        """Update the given transaction fields."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction permanently."""
        pass

    # Ledger queries
    @abstractmethod
    def find_transactions(
        self,
        filter: TransactionFilter,
        sort: TransactionSort = TransactionSort.NEWEST_FIRST,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Transaction]:
        """List transactions matching a filter.

        Args:
            filter: Filter predicate
            sort: NEWEST_FIRST orders by date, then creation time, descending
            limit: Optional maximum number of rows
            offset: Number of rows to skip
        """
        pass

    @abstractmethod
    def count_transactions(self, filter: TransactionFilter) -> int:
        """Count transactions matching a filter."""
        pass

    @abstractmethod
    def aggregate_sum(self, filter: TransactionFilter) -> Decimal:
        """Sum the amounts of transactions matching a filter (0 when none match)."""
        pass
