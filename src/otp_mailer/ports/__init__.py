"""Ports package - defines interfaces for external dependencies."""

from .email import MailTransport, PasswordResetSender

__all__ = [
    "MailTransport",
    "PasswordResetSender",
]
