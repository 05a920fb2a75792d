"""Notification layer for spendwise application."""

from spendwise.notifications.base import Notifier
from spendwise.notifications.factories import create_notifier

__all__ = ["Notifier", "create_notifier"]
