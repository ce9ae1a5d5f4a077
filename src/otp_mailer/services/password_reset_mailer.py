from ..domain.mail import Delivered, DeliveryFailed, DeliveryResult, render_password_reset
from ..logging_config import get_logger
from ..metrics import PASSWORD_RESET_EMAILS
from ..ports.email import MailTransport

logger = get_logger(__name__)


class PasswordResetMailer:
    def __init__(self, transport: MailTransport, sender: str):
        self.transport = transport
        self.sender = sender

    async def send_mail(self, recipient: str, otp: str | int) -> None:
        """Send the password reset code to ``recipient``.

        Any failure is logged once and re-raised unchanged.
        """
        message = render_password_reset(self.sender, recipient, otp)
        try:
            await self.transport.send(message)
        except Exception as e:
            PASSWORD_RESET_EMAILS.labels(result="failed").inc()
            logger.error(
                "mail_send_failed",
                recipient=recipient,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise
        PASSWORD_RESET_EMAILS.labels(result="sent").inc()
        logger.info("mail_sent", recipient=recipient, subject=message.subject)

    async def deliver(self, recipient: str, otp: str | int) -> DeliveryResult:
        """Like ``send_mail`` but returns the outcome instead of raising."""
        try:
            await self.send_mail(recipient, otp)
        except Exception as e:
            return DeliveryFailed(recipient=recipient, cause=e)
        return Delivered(recipient=recipient)


async def send_mail(mailer: PasswordResetMailer, recipient: str, otp: str | int) -> None:
    await mailer.send_mail(recipient, otp)
