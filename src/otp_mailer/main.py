from .deps.providers import get_settings
from .wiring import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("otp_mailer.main:app", host=settings.server_host, port=settings.server_port)
