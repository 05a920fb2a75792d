"""Mapper functions to convert between domain models and SQLAlchemy models.

Enums are stored as their string values; this layer turns them back into
domain enums.
"""

from decimal import Decimal

from spendwise.domain import entities as domain
from spendwise.database.models import (
    User as ORMUser,
    Transaction as ORMTransaction,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        name=orm_user.name,
        email=orm_user.email,
        budget=Decimal(orm_user.budget or 0),
        email_notifications=orm_user.email_notifications,
        created_at=orm_user.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        user_id=orm_transaction.user_id,
        type=domain.TransactionType(orm_transaction.type),
        amount=Decimal(orm_transaction.amount),
        category=domain.Category(orm_transaction.category),
        description=orm_transaction.description,
        date=orm_transaction.date,
        created_at=orm_transaction.created_at,
    )
