"""Notifier that only logs, used when no mail server is configured."""

import logging

from spendwise.domain.entities import NotificationRequest
from spendwise.notifications.base import Notifier

logger = logging.getLogger(__name__)


class LogNotifier(Notifier):
    """Writes notifications to the log instead of delivering them."""

    def send(self, request: NotificationRequest) -> None:
        logger.warning(
            "No mail server configured; notification for %s not sent: %s",
            request.recipient_email,
            request.subject,
        )
