import prometheus_client
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Guard against duplicated metric registration when the module is imported
# multiple times (for example, when running uvicorn with the reloader).
PASSWORD_RESET_EMAILS = getattr(prometheus_client, "otp_mailer_PASSWORD_RESET_EMAILS", None)
SMTP_SEND_DURATION = getattr(prometheus_client, "otp_mailer_SMTP_SEND_DURATION", None)

if PASSWORD_RESET_EMAILS is None:
    PASSWORD_RESET_EMAILS = Counter(
        "password_reset_emails_total",
        "Total password reset emails handed to the transport",
        ["result"],  # result: sent/failed
    )
    SMTP_SEND_DURATION = Histogram(
        "smtp_send_duration_seconds", "Duration of a single SMTP submission in seconds"
    )

    prometheus_client.otp_mailer_PASSWORD_RESET_EMAILS = PASSWORD_RESET_EMAILS  # type: ignore[attr-defined]
    prometheus_client.otp_mailer_SMTP_SEND_DURATION = SMTP_SEND_DURATION  # type: ignore[attr-defined]


def metrics_response():
    data = generate_latest()
    return data, CONTENT_TYPE_LATEST
