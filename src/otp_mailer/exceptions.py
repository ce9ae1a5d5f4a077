"""Errors raised by the mailer itself (transport errors propagate unchanged)."""


class MailDeliveryError(Exception):
    """A password reset email could not be handed to the relay."""


class MailConfigurationError(MailDeliveryError):
    """Sender address or credential is missing; raised at send time only."""

    def __init__(self, setting: str):
        super().__init__(f"mail sender is not configured: {setting} is empty")
        self.setting = setting
