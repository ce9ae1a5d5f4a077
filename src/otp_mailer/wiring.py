from fastapi import FastAPI
from fastapi.responses import Response

from .config import Settings
from .deps.providers import build_mailer, get_settings
from .logging_config import configure_logging, get_logger
from .metrics import metrics_response
from .ports.email import MailTransport
from .routers import health, mail

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, transport: MailTransport | None = None) -> FastAPI:
    """Create and wire the FastAPI application.

    The mailer (and its transport) is constructed exactly once here and shared
    by every request through ``app.state.mailer``. Tests pass ``transport`` to
    substitute a fake relay.
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="OTP Mailer")
    app.state.settings = settings
    app.state.mailer = build_mailer(settings, transport=transport)

    app.include_router(health.router)
    app.include_router(mail.router)

    @app.get("/metrics")
    async def _metrics():
        data, content_type = metrics_response()
        return Response(content=data, media_type=content_type)

    return app


__all__ = ["create_app"]
