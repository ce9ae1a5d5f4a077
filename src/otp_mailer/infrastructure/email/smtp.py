from email.message import EmailMessage

import aiosmtplib

from ...domain.mail import MailerConfig, MailMessage
from ...exceptions import MailConfigurationError
from ...metrics import SMTP_SEND_DURATION


def to_email_message(message: MailMessage) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = message.sender
    msg["To"] = message.recipient
    msg["Subject"] = message.subject
    msg.set_content(message.html, subtype="html")
    return msg


class SmtpMailTransport:
    """SMTP relay transport.

    Holds only the connection parameters; every send opens its own session,
    upgrades it with STARTTLS before authenticating, submits one message and
    closes it. Concurrent sends therefore never share a connection.
    """

    def __init__(self, config: MailerConfig):
        self.config = config

    def _check_configured(self) -> None:
        if not self.config.sender:
            raise MailConfigurationError("EMAIL")
        if not self.config.password:
            raise MailConfigurationError("EMAIL_PASS")

    async def send(self, message: MailMessage) -> None:
        self._check_configured()
        with SMTP_SEND_DURATION.time():
            await aiosmtplib.send(
                to_email_message(message),
                hostname=self.config.host,
                port=self.config.port,
                username=self.config.sender,
                password=self.config.password,
                use_tls=False,
                start_tls=True if self.config.require_tls else None,
            )
