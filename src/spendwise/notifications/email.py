"""SMTP email notifier."""

import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from spendwise.domain.entities import NotificationRequest
from spendwise.domain.errors import NotificationDispatchFailedError
from spendwise.notifications.base import Notifier, render_budget_alert

logger = logging.getLogger(__name__)


class SMTPNotifier(Notifier):
    """Sends notifications as plain-text email over SMTP with STARTTLS."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender: Optional[str] = None,
        timeout: float = 10.0,
    ):
        """Initialize SMTP notifier.

        Args:
            host: SMTP server host
            port: SMTP server port
            username: Optional login user
            password: Optional login password
            sender: From address (defaults to username)
            timeout: Socket timeout in seconds
        """
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username or f"spendwise@{host}"
        self.timeout = timeout

    def build_message(self, request: NotificationRequest) -> EmailMessage:
        """Build the email for a notification request."""
        message = EmailMessage()
        message["From"] = f'"Spendwise" <{self.sender}>'
        message["To"] = request.recipient_email
        message["Subject"] = request.subject
        message.set_content(render_budget_alert(request))
        return message

    def send(self, request: NotificationRequest) -> None:
        """Send a notification email."""
        message = self.build_message(request)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.starttls()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationDispatchFailedError(
                f"Could not send email to {request.recipient_email}: {e}"
            ) from e
        logger.info("Email sent to %s: %s", request.recipient_email, request.subject)
