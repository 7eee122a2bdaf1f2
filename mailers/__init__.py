"""Verification code delivery backends."""

from .abstract_mailer import AbstractMailer, DeliveryResult
from .console_mailer import ConsoleMailer
from .smtp_mailer import SmtpMailer

__all__ = ["AbstractMailer", "DeliveryResult", "ConsoleMailer", "SmtpMailer", "build_mailer"]


def build_mailer(config) -> AbstractMailer:
    """Return the mailer selected by ``MAIL_BACKEND``."""

    backend = (config.get("MAIL_BACKEND") or "console").strip().lower()
    if backend == "smtp":
        return SmtpMailer(
            host=config["SMTP_HOST"],
            port=int(config["SMTP_PORT"]),
            username=config.get("SMTP_USERNAME"),
            password=config.get("SMTP_PASSWORD"),
            sender=config["MAIL_SENDER"],
            subject=config["MAIL_SUBJECT"],
            use_ssl=bool(config.get("SMTP_USE_SSL", True)),
            timeout=float(config.get("SMTP_TIMEOUT", 10)),
        )
    if backend == "console":
        return ConsoleMailer()
    raise ValueError(f"Unknown MAIL_BACKEND: {backend!r}")
