from otp_auth.presentation.dependencies import get_email_port
from tests.fakes import FakeEmailDown


def test_send_route_happy_path(client, app_and_deps):
    _, registry, email, _ = app_and_deps

    response = client.post("/v1/otp/send", json={"email": "Jeremy@Example.com"})

    assert response.status_code == 200
    assert response.json() == {"message": "OTP has been sent to your email."}
    assert registry.get("jeremy@example.com").code == "123456"
    assert len(email.calls) == 1
    assert email.calls[0]["to"] == "jeremy@example.com"
    assert "123456" in email.calls[0]["body"]


def test_send_route_missing_email(client, app_and_deps):
    _, registry, email, _ = app_and_deps

    for body in ({}, {"email": ""}, {"email": "   "}, {"email": None}):
        response = client.post("/v1/otp/send", json=body)
        assert response.status_code == 400, body
        assert response.json() == {"detail": "email is required"}

    assert len(registry) == 0
    assert email.calls == []


def test_send_route_malformed_email(client, app_and_deps):
    _, registry, _, _ = app_and_deps

    response = client.post("/v1/otp/send", json={"email": "not-an-email"})

    assert response.status_code == 422
    assert len(registry) == 0


def test_send_route_delivery_failure(client, app_and_deps):
    app, registry, _, _ = app_and_deps
    app.dependency_overrides[get_email_port] = lambda: FakeEmailDown()

    response = client.post("/v1/otp/send", json={"email": "a@x.com"})

    assert response.status_code == 502
    assert response.json() == {"detail": "failed to send OTP email"}
    # the code was issued before delivery failed
    assert "a@x.com" in registry
