import sys
from pathlib import Path

# Ensure the project's src directory is on sys.path for tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))
sys.path.insert(0, str(ROOT))

import aiosmtplib  # noqa: E402
import pytest  # noqa: E402

from otp_mailer.config import Settings  # noqa: E402
from otp_mailer.infrastructure.email.mock import MockMailTransport  # noqa: E402
from otp_mailer.services.password_reset_mailer import PasswordResetMailer  # noqa: E402

SENDER = "noreply@example.com"


class FailingTransport:
    """Transport stub whose relay rejects every submission."""

    def __init__(self, error: Exception | None = None):
        self.error = error or aiosmtplib.SMTPAuthenticationError(
            535, "5.7.8 Username and Password not accepted"
        )
        self.attempts = []

    async def send(self, message) -> None:
        self.attempts.append(message)
        raise self.error


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    """Settings isolated from the host environment and any local .env file."""
    return Settings(
        _env_file=None,
        email=SENDER,
        email_pass="app-password",
        mail_backend="mock",
    )


@pytest.fixture
def transport():
    return MockMailTransport()


@pytest.fixture
def failing_transport():
    return FailingTransport()


@pytest.fixture
def mailer(transport):
    return PasswordResetMailer(transport, sender=SENDER)


@pytest.fixture
def failing_mailer(failing_transport):
    return PasswordResetMailer(failing_transport, sender=SENDER)
