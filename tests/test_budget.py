"""Tests for budget snapshots."""

from datetime import date
from decimal import Decimal

import pytest

from spendwise.domain.budget import BudgetService, calculate_snapshot, usage_percent
from spendwise.domain.entities import Category, TransactionType
from spendwise.domain.errors import InvalidArgumentError, NotFoundError


class TestCalculateSnapshot:
    def test_no_expenses(self):
        snapshot = calculate_snapshot(Decimal("500"), Decimal("0"), date(2024, 5, 20))

        assert snapshot.current_expenses == 0
        assert snapshot.remaining == Decimal("500")
        assert snapshot.budget_usage == 0
        assert snapshot.is_over_budget is False

    def test_under_budget(self):
        snapshot = calculate_snapshot(Decimal("1000"), Decimal("850"), date(2024, 5, 20))

        assert snapshot.remaining == Decimal("150")
        assert snapshot.budget_usage == Decimal("85.0")
        assert snapshot.raw_budget_usage == Decimal("85.0")
        assert snapshot.is_over_budget is False

    def test_over_budget_clamps_display_usage(self):
        snapshot = calculate_snapshot(Decimal("1000"), Decimal("1200"), date(2024, 5, 20))

        assert snapshot.remaining == 0
        assert snapshot.budget_usage == Decimal("100")
        assert snapshot.raw_budget_usage == Decimal("120")
        assert snapshot.is_over_budget is True

    def test_exactly_at_budget_is_not_over(self):
        snapshot = calculate_snapshot(Decimal("1000"), Decimal("1000"), date(2024, 5, 20))

        assert snapshot.budget_usage == Decimal("100")
        assert snapshot.is_over_budget is False

    def test_zero_budget_has_zero_usage(self):
        snapshot = calculate_snapshot(Decimal("0"), Decimal("250"), date(2024, 5, 20))

        assert snapshot.budget_usage == 0
        assert snapshot.raw_budget_usage == 0
        assert snapshot.remaining == 0
        assert snapshot.is_over_budget is True

    def test_period_is_calendar_month(self):
        snapshot = calculate_snapshot(Decimal("1000"), Decimal("0"), date(2024, 2, 10))

        assert snapshot.period_start == date(2024, 2, 1)
        assert snapshot.period_end == date(2024, 2, 29)

    def test_negative_budget_rejected(self):
        with pytest.raises(InvalidArgumentError):
            calculate_snapshot(Decimal("-1"), Decimal("0"), date(2024, 5, 20))

    def test_usage_percent_guards_zero_budget(self):
        assert usage_percent(Decimal("100"), Decimal("0")) == 0


class TestBudgetService:
    def test_snapshot_uses_current_month_expenses(
        self, temp_db, sample_user, add_transaction, reference_date
    ):
        add_transaction(sample_user.id, "600", date(2024, 5, 1))
        add_transaction(sample_user.id, "250", date(2024, 5, 31))
        add_transaction(sample_user.id, "400", date(2024, 4, 30))
        add_transaction(
            sample_user.id, "5000", date(2024, 5, 2),
            type=TransactionType.INCOME, category=Category.SALARY,
        )

        snapshot = BudgetService(temp_db).get_snapshot(sample_user.id, reference_date)

        assert snapshot.budget == Decimal("1000")
        assert snapshot.current_expenses == Decimal("850")
        assert snapshot.remaining == Decimal("150")
        assert snapshot.budget_usage == Decimal("85")
        assert snapshot.is_over_budget is False
        assert snapshot.period_start == date(2024, 5, 1)
        assert snapshot.period_end == date(2024, 5, 31)

    def test_snapshot_empty_ledger(self, temp_db, sample_user, reference_date):
        snapshot = BudgetService(temp_db).get_snapshot(sample_user.id, reference_date)

        assert snapshot.current_expenses == 0
        assert snapshot.remaining == sample_user.budget
        assert snapshot.budget_usage == 0
        assert snapshot.is_over_budget is False

    def test_unknown_user(self, temp_db, reference_date):
        with pytest.raises(NotFoundError):
            BudgetService(temp_db).get_snapshot(999, reference_date)
