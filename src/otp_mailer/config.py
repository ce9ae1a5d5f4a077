from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    server_host: str = "0.0.0.0"
    server_port: int = 8080
    log_level: str = "INFO"
    # Sender mailbox: EMAIL is both the From address and the SMTP login
    email: str = ""
    email_pass: str = ""
    # SMTP relay (STARTTLS on the submission port)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_require_tls: bool = True
    # "smtp" for the real relay, "mock" to record messages in memory
    mail_backend: str = "smtp"
