from .mock import MockMailTransport
from .smtp import SmtpMailTransport, to_email_message

__all__ = ["MockMailTransport", "SmtpMailTransport", "to_email_message"]
