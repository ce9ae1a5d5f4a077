from .mail import (
    PASSWORD_RESET_SUBJECT,
    Delivered,
    DeliveryFailed,
    DeliveryResult,
    MailerConfig,
    MailMessage,
    render_password_reset,
)

__all__ = [
    "PASSWORD_RESET_SUBJECT",
    "Delivered",
    "DeliveryFailed",
    "DeliveryResult",
    "MailerConfig",
    "MailMessage",
    "render_password_reset",
]
