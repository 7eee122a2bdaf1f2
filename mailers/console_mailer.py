"""Development mailer that writes codes to the application log."""

from __future__ import annotations

import logging

from .abstract_mailer import AbstractMailer, DeliveryResult

logger = logging.getLogger(__name__)


class ConsoleMailer(AbstractMailer):
    """Log the code instead of sending it. Never use in production."""

    def send(self, email: str, display_name: str, code: str) -> DeliveryResult:
        logger.info("Verification code for %s (%s): %s", email, display_name, code)
        return DeliveryResult(True, "Verification Email sent successfully.")
