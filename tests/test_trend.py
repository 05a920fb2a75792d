"""Tests for the monthly trend builder."""

from datetime import date
from decimal import Decimal

import pytest

from spendwise.domain.errors import InvalidArgumentError
from spendwise.domain.trend import TrendService


def test_default_trend_has_six_points_oldest_first(temp_db, sample_user):
    trend = TrendService(temp_db).build_trend(sample_user.id, Decimal("1000"), date(2024, 3, 15))

    keys = [point.month_key for point in trend]
    assert keys == ["2023-10", "2023-11", "2023-12", "2024-01", "2024-02", "2024-03"]
    assert keys == sorted(keys)
    assert len(set(keys)) == 6


def test_points_sum_each_calendar_month(temp_db, sample_user, add_transaction):
    add_transaction(sample_user.id, "300", date(2024, 1, 31))
    add_transaction(sample_user.id, "1200", date(2024, 2, 1))
    add_transaction(sample_user.id, "100", date(2024, 2, 29))

    trend = TrendService(temp_db).build_trend(
        sample_user.id, Decimal("1000"), date(2024, 3, 15), months=3
    )

    assert [(p.month_key, p.expenses, p.savings) for p in trend] == [
        ("2024-01", Decimal("300"), Decimal("700")),
        ("2024-02", Decimal("1300"), Decimal("0")),
        ("2024-03", Decimal("0"), Decimal("1000")),
    ]


def test_current_budget_applied_to_every_month(temp_db, sample_user):
    trend = TrendService(temp_db).build_trend(
        sample_user.id, Decimal("750"), date(2024, 3, 15), months=4
    )
    assert all(point.budget == Decimal("750") for point in trend)


def test_trend_is_restartable(temp_db, sample_user, add_transaction):
    add_transaction(sample_user.id, "42", date(2024, 2, 10))
    service = TrendService(temp_db)

    first = service.build_trend(sample_user.id, Decimal("100"), date(2024, 3, 1))
    second = service.build_trend(sample_user.id, Decimal("100"), date(2024, 3, 1))

    assert first == second


def test_zero_months_is_empty(temp_db, sample_user):
    assert TrendService(temp_db).build_trend(sample_user.id, Decimal("100"), date(2024, 3, 1), months=0) == []


def test_negative_months_rejected(temp_db, sample_user):
    with pytest.raises(InvalidArgumentError):
        TrendService(temp_db).build_trend(sample_user.id, Decimal("100"), date(2024, 3, 1), months=-1)
