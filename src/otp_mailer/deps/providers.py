"""Singleton providers for application-wide settings and the mailer.

The transport is built once per process by the composition root
(``wiring.create_app``) and read back from ``app.state`` per request.
"""

from fastapi import Request

from ..config import Settings
from ..domain.mail import MailerConfig
from ..infrastructure.email.mock import MockMailTransport
from ..infrastructure.email.smtp import SmtpMailTransport
from ..logging_config import get_logger
from ..ports.email import MailTransport
from ..services.password_reset_mailer import PasswordResetMailer

logger = get_logger(__name__)

# Lazy singleton to avoid import-time side-effects
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def build_transport(settings: Settings) -> MailTransport:
    """Choose the transport named by MAIL_BACKEND (smtp unless set to mock)."""
    if settings.mail_backend.lower() == "mock":
        return MockMailTransport()
    return SmtpMailTransport(MailerConfig.from_settings(settings))


def build_mailer(settings: Settings, transport: MailTransport | None = None) -> PasswordResetMailer:
    config = MailerConfig.from_settings(settings)
    if transport is None:
        transport = build_transport(settings)
    if not config.sender or not config.password:
        # not fatal: sends will fail with MailConfigurationError
        logger.warning(
            "mail_sender_not_configured",
            has_sender=bool(config.sender),
            has_password=bool(config.password),
        )
    logger.info(
        "mailer_initialized",
        transport=type(transport).__name__,
        host=config.host,
        port=config.port,
    )
    return PasswordResetMailer(transport, sender=config.sender)


def get_mailer(request: Request) -> PasswordResetMailer:
    """Return the process-wide mailer created at startup."""
    return request.app.state.mailer
