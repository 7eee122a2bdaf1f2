"""SMTP delivery of verification codes."""

from __future__ import annotations

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import parseaddr

from .abstract_mailer import AbstractMailer, DeliveryResult

logger = logging.getLogger(__name__)

BODY_TEMPLATE = """\
<!DOCTYPE html>
<html>
<body style="font-family: Arial, sans-serif; color: #333;">
    <h2>Hello {display_name},</h2>
    <p>Use the following code to verify your email address:</p>
    <div style="background-color: #f2f2f2; padding: 10px; border-radius: 5px;
                display: inline-block; font-size: 18px; font-weight: bold;">{code}</div>
    <p>The code expires in one hour. If you did not request it, ignore this email.</p>
</body>
</html>
"""


class SmtpMailer(AbstractMailer):
    """Send verification codes through an SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        subject: str,
        username: str | None = None,
        password: str | None = None,
        use_ssl: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.subject = subject
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout

    def build_message(self, email: str, display_name: str, code: str) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["Subject"] = self.subject
        message["From"] = self.sender
        message["To"] = email
        message.attach(
            MIMEText(BODY_TEMPLATE.format(display_name=display_name, code=code), "html")
        )
        return message

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        try:
            server.starttls()
        except BaseException:
            server.close()
            raise
        return server

    def send(self, email: str, display_name: str, code: str) -> DeliveryResult:
        message = self.build_message(email, display_name, code)
        _, from_address = parseaddr(self.sender)
        try:
            with self._connect() as server:
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.sendmail(from_address or self.sender, [email], message.as_string())
        except (smtplib.SMTPException, OSError):
            logger.exception("Email sending error for %s", email)
            return DeliveryResult(False, "Failed to send Verification email")

        return DeliveryResult(True, "Verification Email sent successfully.")
