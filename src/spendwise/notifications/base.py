"""Abstract notifier interface and message rendering."""

from abc import ABC, abstractmethod
from decimal import Decimal

from spendwise.domain.entities import NotificationRequest


class Notifier(ABC):
    """Messaging collaborator that delivers budget alerts."""

    @abstractmethod
    def send(self, request: NotificationRequest) -> None:
        """Deliver a notification.

        Raises:
            NotificationDispatchFailedError: If delivery fails
        """
        pass


def budget_alert_subject(usage_percent: Decimal) -> str:
    """Return the subject line for a budget alert."""
    return f"Budget Alert - {usage_percent:.1f}% Used"


def render_budget_alert(request: NotificationRequest) -> str:
    """Render the plain-text body of a budget alert."""
    usage = request.body_fields["usage_percent"]
    current_expenses = request.body_fields["current_expenses"]
    budget = request.body_fields["budget"]
    remaining = max(Decimal("0"), budget - current_expenses)

    lines = [
        f"Hi {request.recipient_name},",
        "",
        f"You have used {usage:.1f}% of your monthly budget.",
        "",
        f"Current Expenses: ${current_expenses:,.2f}",
        f"Monthly Budget: ${budget:,.2f}",
        f"Remaining: ${remaining:,.2f}",
        "",
    ]
    if usage >= 100:
        lines.append("You have exceeded your budget!")
    else:
        lines.append("Please review your spending to stay within budget.")
    lines.extend(["", "Best regards,", "Spendwise"])
    return "\n".join(lines)
