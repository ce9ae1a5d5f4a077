"""Pydantic schemas for the HTTP API."""

from .mail import PasswordResetMailRequest, PasswordResetMailResponse

__all__ = ["PasswordResetMailRequest", "PasswordResetMailResponse"]
