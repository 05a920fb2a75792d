"""Tests for notifiers and alert rendering."""

import smtplib
from decimal import Decimal

import pytest

from spendwise.domain.entities import NotificationRequest
from spendwise.domain.errors import NotificationDispatchFailedError
from spendwise.notifications.base import budget_alert_subject, render_budget_alert
from spendwise.notifications.email import SMTPNotifier
from spendwise.notifications.factories import create_notifier
from spendwise.notifications.log_notifier import LogNotifier


def _request(usage="85", expenses="850", budget="1000"):
    return NotificationRequest(
        recipient_email="alex@example.com",
        recipient_name="Alex",
        subject=budget_alert_subject(Decimal(usage)),
        body_fields={
            "usage_percent": Decimal(usage),
            "current_expenses": Decimal(expenses),
            "budget": Decimal(budget),
        },
    )


def test_subject():
    assert budget_alert_subject(Decimal("83.333")) == "Budget Alert - 83.3% Used"


def test_render_under_budget():
    body = render_budget_alert(_request())

    assert "Hi Alex," in body
    assert "You have used 85.0% of your monthly budget." in body
    assert "Current Expenses: $850.00" in body
    assert "Monthly Budget: $1,000.00" in body
    assert "Remaining: $150.00" in body
    assert "Please review your spending" in body


def test_render_over_budget():
    body = render_budget_alert(_request(usage="120", expenses="1200"))

    assert "Remaining: $0.00" in body
    assert "You have exceeded your budget!" in body


def test_factory_without_host_logs(monkeypatch):
    monkeypatch.delenv("SPENDWISE_SMTP_HOST", raising=False)
    assert isinstance(create_notifier(), LogNotifier)


def test_factory_with_host(monkeypatch):
    monkeypatch.setenv("SPENDWISE_SMTP_PORT", "2525")
    monkeypatch.setenv("SPENDWISE_MAIL_FROM", "alerts@example.com")

    notifier = create_notifier("smtp.example.com")

    assert isinstance(notifier, SMTPNotifier)
    assert notifier.port == 2525
    assert notifier.sender == "alerts@example.com"


def test_build_message():
    message = SMTPNotifier("smtp.example.com", sender="alerts@example.com").build_message(_request())

    assert message["To"] == "alex@example.com"
    assert message["Subject"] == "Budget Alert - 85.0% Used"
    assert "Remaining: $150.00" in message.get_content()


class _FakeSMTP:
    sent = []

    def __init__(self, host, port, timeout=None):
        self.host = host

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        pass

    def login(self, user, password):
        pass

    def send_message(self, message):
        _FakeSMTP.sent.append(message)


def test_smtp_send(monkeypatch):
    _FakeSMTP.sent = []
    monkeypatch.setattr(smtplib, "SMTP", _FakeSMTP)

    SMTPNotifier("smtp.example.com", username="u", password="p").send(_request())

    assert len(_FakeSMTP.sent) == 1
    assert _FakeSMTP.sent[0]["To"] == "alex@example.com"


def test_smtp_failure_is_dispatch_error(monkeypatch):
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(smtplib, "SMTP", refuse)

    with pytest.raises(NotificationDispatchFailedError, match="alex@example.com"):
        SMTPNotifier("smtp.example.com").send(_request())
