import pytest

from tests.fixtures.app_factory import create_test_client


@pytest.mark.anyio
async def test_password_reset_endpoint_sends_code(settings, transport):
    async with create_test_client(settings, transport) as ac:
        resp = await ac.post(
            "/api/v1/mail/password-reset",
            json={"recipient": "user@example.com", "otp": "654321"},
        )

    assert resp.status_code == 202
    assert resp.json() == {"status": "sent"}
    assert len(transport.sent) == 1
    assert transport.sent[0].recipient == "user@example.com"
    assert transport.sent[0].sender == settings.email
    assert "654321" in transport.sent[0].html


@pytest.mark.anyio
async def test_password_reset_endpoint_hides_relay_error(settings, failing_transport):
    async with create_test_client(settings, failing_transport) as ac:
        resp = await ac.post(
            "/api/v1/mail/password-reset",
            json={"recipient": "user@example.com", "otp": "654321"},
        )

    assert resp.status_code == 502
    assert resp.json() == {"detail": "failed to send password reset email"}
    assert len(failing_transport.attempts) == 1


@pytest.mark.anyio
async def test_password_reset_endpoint_requires_code(settings, transport):
    async with create_test_client(settings, transport) as ac:
        resp = await ac.post("/api/v1/mail/password-reset", json={"recipient": "user@example.com"})

    assert resp.status_code == 422
    assert transport.sent == []


@pytest.mark.anyio
async def test_health_and_metrics(settings, transport):
    async with create_test_client(settings, transport) as ac:
        await ac.post(
            "/api/v1/mail/password-reset",
            json={"recipient": "user@example.com", "otp": "1"},
        )
        health = await ac.get("/health")
        metrics = await ac.get("/metrics")

    assert health.status_code == 200
    assert health.json() == {"status": "ok"}
    assert metrics.status_code == 200
    assert "password_reset_emails_total" in metrics.text
