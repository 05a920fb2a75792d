"""Tests for the Database interface returning domain models."""

from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy import text

from spendwise.database.factories import resolve_database_path
from spendwise.domain import entities
from spendwise.domain.entities import Category, TransactionFilter, TransactionSort, TransactionType
from spendwise.domain.errors import DependencyUnavailableError, NotFoundError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_user_returns_domain_model(self, temp_db):
        user_id = temp_db.create_user(name="Alex", email="alex@example.com", budget=Decimal("1500"))

        user = temp_db.get_user(user_id)

        assert isinstance(user, entities.User)
        assert user.budget == Decimal("1500")
        assert user.email_notifications is True
        assert isinstance(user.created_at, datetime)

    def test_get_transaction_returns_domain_model(self, temp_db, sample_user, add_transaction):
        txn_id = add_transaction(sample_user.id, "12.34", date(2024, 1, 15), category=Category.EDUCATION)

        txn = temp_db.get_transaction(txn_id)

        assert isinstance(txn, entities.Transaction)
        assert txn.type == TransactionType.EXPENSE
        assert txn.category == Category.EDUCATION
        assert txn.amount == Decimal("12.34")
        assert txn.date == date(2024, 1, 15)

    def test_missing_entities(self, temp_db):
        assert temp_db.get_user(1) is None
        assert temp_db.get_user_by_email("nobody@example.com") is None
        assert temp_db.get_transaction(1) is None
        with pytest.raises(NotFoundError):
            temp_db.delete_transaction(1)
        with pytest.raises(NotFoundError):
            temp_db.update_user_budget(1, Decimal("10"))


class TestLedgerQueries:
    def test_sort_orders(self, temp_db, sample_user, add_transaction):
        add_transaction(sample_user.id, "1", date(2024, 1, 2), description="b")
        add_transaction(sample_user.id, "1", date(2024, 1, 1), description="a")
        add_transaction(sample_user.id, "1", date(2024, 1, 3), description="c")
        ledger_filter = TransactionFilter(user_id=sample_user.id)

        newest = temp_db.find_transactions(ledger_filter)
        oldest = temp_db.find_transactions(ledger_filter, sort=TransactionSort.OLDEST_FIRST)

        assert [t.description for t in newest] == ["c", "b", "a"]
        assert [t.description for t in oldest] == ["a", "b", "c"]

    def test_limit_and_offset(self, temp_db, sample_user, add_transaction):
        for day in range(1, 6):
            add_transaction(sample_user.id, "1", date(2024, 1, day))

        page = temp_db.find_transactions(TransactionFilter(user_id=sample_user.id), limit=2, offset=2)

        assert [t.date.day for t in page] == [3, 2]

    def test_count_and_sum(self, temp_db, sample_user, add_transaction):
        add_transaction(sample_user.id, "10.10", date(2024, 1, 1))
        add_transaction(sample_user.id, "20.20", date(2024, 1, 31))
        add_transaction(sample_user.id, "99", date(2024, 1, 15), type=TransactionType.INCOME, category=Category.SALARY)
        expense_filter = TransactionFilter(
            user_id=sample_user.id,
            type=TransactionType.EXPENSE,
            date_from=date(2024, 1, 1),
            date_to=date(2024, 1, 31),
        )

        assert temp_db.count_transactions(expense_filter) == 2
        assert temp_db.aggregate_sum(expense_filter) == Decimal("30.30")

    def test_sum_of_nothing_is_zero(self, temp_db, sample_user):
        assert temp_db.aggregate_sum(TransactionFilter(user_id=sample_user.id)) == Decimal("0")

    def test_read_failure_raises_dependency_unavailable(self, temp_db, sample_user):
        session = temp_db._get_session()
        session.execute(text("DROP TABLE transactions"))
        session.commit()

        with pytest.raises(DependencyUnavailableError):
            temp_db.find_transactions(TransactionFilter(user_id=sample_user.id))
        with pytest.raises(DependencyUnavailableError):
            temp_db.aggregate_sum(TransactionFilter(user_id=sample_user.id))


class TestUserRows:
    def test_update_user_fields(self, temp_db, sample_user):
        temp_db.update_user(sample_user.id, name="Alexandra")

        user = temp_db.get_user(sample_user.id)
        assert user.name == "Alexandra"
        assert user.email == "alex@example.com"

    def test_delete_user_cascades(self, temp_db, sample_user, add_transaction):
        txn_id = add_transaction(sample_user.id, "15", date(2024, 5, 1))

        temp_db.delete_user(sample_user.id)

        assert temp_db.get_user(sample_user.id) is None
        assert temp_db.get_transaction(txn_id) is None
        count = temp_db._get_session().execute(text("SELECT COUNT(*) FROM transactions")).scalar()
        assert count == 0

    def test_missing_user(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_user(404, name="Nobody")
        with pytest.raises(NotFoundError):
            temp_db.delete_user(404)


class TestDatabasePath:
    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SPENDWISE_DB_PATH", str(tmp_path / "env.db"))
        assert resolve_database_path(str(tmp_path / "cli.db")) == tmp_path / "cli.db"

    def test_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SPENDWISE_DB_PATH", str(tmp_path / "nested" / "env.db"))

        path = resolve_database_path()

        assert path == tmp_path / "nested" / "env.db"
        assert path.parent.is_dir()

    def test_default_under_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SPENDWISE_DB_PATH", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert resolve_database_path() == tmp_path / ".spendwise" / "spendwise.db"
