from typing import Protocol

from ..domain.mail import DeliveryResult, MailMessage


class MailTransport(Protocol):
    """Protocol for submitting one message to a mail relay."""

    async def send(self, message: MailMessage) -> None: ...


class PasswordResetSender(Protocol):
    """Protocol for password reset email operations."""

    async def send_mail(self, recipient: str, otp: str) -> None: ...
    async def deliver(self, recipient: str, otp: str) -> DeliveryResult: ...
