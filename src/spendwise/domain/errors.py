"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InvalidArgumentError(ValidationError):
    """Calculator called with an argument of the wrong shape."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyUnavailableError(DomainError):
    """The ledger could not be read."""


class NotificationDispatchFailedError(DomainError):
    """The messaging collaborator failed to deliver a notification."""


def user_not_found(user_id: int) -> str:
    """Return message for missing user."""
    return f"User {user_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def duplicate_user_email(email: str) -> str:
    """Return message for an email that is already registered."""
    return f"User with email '{email}' already exists"


def invalid_date_range(date_from, date_to) -> str:
    """Return message for a date range whose start is after its end."""
    return f"Invalid date range: {date_from} is after {date_to}"
