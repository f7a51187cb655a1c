"""Console notifier adapters.

Mental model refresher:
- This is outbound adapter code.
- In production, this is where provider SDK/API calls would live (SMTP, Twilio).
- Application code calls these through the Notifier contract; it does not know
  which channel is underneath.
"""

from __future__ import annotations

from ..types import EmitFn


class EmailNotifier:
    """Delivers messages on the email channel."""

    channel = "email"

    def __init__(self, emit: EmitFn = print) -> None:
        self._emit = emit

    def notify(self, message: str) -> None:
        self._emit(f"Email Notification: {message}")


class SMSNotifier:
    """Delivers messages on the SMS channel."""

    channel = "sms"

    def __init__(self, emit: EmitFn = print) -> None:
        self._emit = emit

    def notify(self, message: str) -> None:
        self._emit(f"SMS Notification: {message}")
