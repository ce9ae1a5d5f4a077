"""Top-level application package public surface."""

__all__ = [
    "deps",
    "domain",
    "infrastructure",
    "ports",
    "routers",
    "schemas",
    "services",
]
