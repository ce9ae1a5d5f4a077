"""Mail domain models: sender configuration, outgoing message and delivery results."""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..config import Settings

PASSWORD_RESET_SUBJECT = "Reset Your Password"
PASSWORD_RESET_TEMPLATE = (
    "<p>Your OTP for Password Reset is <b>{otp}</b>.\n" "        It expires in 5 minutes.</p>"
)


@dataclass(frozen=True, slots=True)
class MailerConfig:
    """Explicit sender configuration handed to the transport at startup.

    Empty ``sender`` or ``password`` is accepted here; the transport reports it
    when a message is actually sent.
    """

    sender: str
    password: str
    host: str = "smtp.gmail.com"
    port: int = 587
    require_tls: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> MailerConfig:
        return cls(
            sender=settings.email.strip(),
            password=settings.email_pass,
            host=settings.smtp_host,
            port=settings.smtp_port,
            require_tls=settings.smtp_require_tls,
        )


@dataclass(frozen=True, slots=True)
class MailMessage:
    """A single outgoing HTML message. No headers beyond from/to/subject."""

    sender: str
    recipient: str
    subject: str
    html: str


def render_password_reset(sender: str, recipient: str, otp: str | int) -> MailMessage:
    """Build the password reset message; only the code differs between renders."""
    body = PASSWORD_RESET_TEMPLATE.format(otp=html.escape(str(otp)))
    return MailMessage(sender=sender, recipient=recipient, subject=PASSWORD_RESET_SUBJECT, html=body)


@dataclass(frozen=True, slots=True)
class Delivered:
    recipient: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class DeliveryFailed:
    """The relay did not accept the message; ``cause`` is the original error."""

    recipient: str
    cause: BaseException

    @property
    def ok(self) -> bool:
        return False

    def raise_cause(self) -> None:
        raise self.cause


DeliveryResult = Union[Delivered, DeliveryFailed]
