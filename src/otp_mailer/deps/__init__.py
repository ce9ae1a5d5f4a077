"""Dependency injection for FastAPI."""

from .providers import build_mailer, build_transport, get_mailer, get_settings

__all__ = [
    "get_settings",
    "get_mailer",
    "build_mailer",
    "build_transport",
]
