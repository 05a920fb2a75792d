"""Shared pytest fixtures for spendwise tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from spendwise.database.factories import create_sqlite_database
from spendwise.domain.alerts import AlertService
from spendwise.domain.entities import Category, TransactionType
from spendwise.domain.errors import NotificationDispatchFailedError
from spendwise.domain.transaction import TransactionService
from spendwise.domain.user import UserService
from spendwise.notifications.base import Notifier


class RecordingNotifier(Notifier):
    """Notifier that keeps every request it is asked to send."""

    def __init__(self):
        self.sent = []

    def send(self, request):
        self.sent.append(request)


class FailingNotifier(Notifier):
    """Notifier whose deliveries always fail."""

    def __init__(self):
        self.attempts = 0

    def send(self, request):
        self.attempts += 1
        raise NotificationDispatchFailedError("SMTP server unreachable")


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_service(temp_db):
    """Create a UserService with a temporary database."""
    return UserService(temp_db)


@pytest.fixture
def recording_notifier():
    """Create a notifier that records requests."""
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    """Create a notifier that always fails."""
    return FailingNotifier()


@pytest.fixture
def alert_service(temp_db, recording_notifier):
    """Create an AlertService that records notifications."""
    return AlertService(temp_db, recording_notifier)


@pytest.fixture
def transaction_service(temp_db, alert_service):
    """Create a TransactionService wired to the recording alert service."""
    return TransactionService(temp_db, alert_service=alert_service)


@pytest.fixture
def sample_user(user_service):
    """Create a user with a 1000 budget and notifications on."""
    user_id = user_service.create_user(
        name="Alex", email="alex@example.com", budget=Decimal("1000")
    )
    return user_service.get_user(user_id)


@pytest.fixture
def add_transaction(temp_db):
    """Return a helper that writes a transaction straight to the ledger."""

    def _add(
        user_id,
        amount,
        txn_date,
        type=TransactionType.EXPENSE,
        category=Category.FOOD,
        description="Test transaction",
    ):
        return temp_db.create_transaction(
            user_id=user_id,
            type=type,
            amount=Decimal(str(amount)),
            category=category,
            description=description,
            date=txn_date,
        )

    return _add


@pytest.fixture
def reference_date():
    """Fixed 'now' used across calculator tests."""
    return date(2024, 5, 20)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
