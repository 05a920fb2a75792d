"""Notifier factory functions."""

import os
from typing import Optional

from spendwise.notifications.base import Notifier
from spendwise.notifications.email import SMTPNotifier
from spendwise.notifications.log_notifier import LogNotifier


def create_notifier(smtp_host: Optional[str] = None) -> Notifier:
    """Create the notifier for the current environment.

    Args:
        smtp_host: SMTP host. If None, checks SPENDWISE_SMTP_HOST environment
            variable; without a host a LogNotifier is returned.

    Returns:
        SMTPNotifier when a host is configured, LogNotifier otherwise
    """
    if smtp_host is None:
        smtp_host = os.environ.get("SPENDWISE_SMTP_HOST")

    if not smtp_host:
        return LogNotifier()

    return SMTPNotifier(
        host=smtp_host,
        port=int(os.environ.get("SPENDWISE_SMTP_PORT", "587")),
        username=os.environ.get("SPENDWISE_SMTP_USER"),
        password=os.environ.get("SPENDWISE_SMTP_PASSWORD"),
        sender=os.environ.get("SPENDWISE_MAIL_FROM"),
    )
