"""Routers package public exports."""

__all__ = [
    "health",
    "mail",
]
