from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from otp_auth.domain.registry import OtpRegistry
from otp_auth.main import create_app
from otp_auth.presentation.dependencies import (
    get_email_port,
    get_email_subject,
    get_registry,
)
from tests.fakes import FakeClock, FakeEmailOK, ScriptedRandom


@pytest.fixture()
def app_and_deps():
    app = create_app()
    clock = FakeClock()
    registry = OtpRegistry(
        clock, rng=ScriptedRandom([123456, 654321]), ttl=timedelta(minutes=5)
    )
    email = FakeEmailOK()

    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_email_port] = lambda: email
    app.dependency_overrides[get_email_subject] = lambda: "Your OTP Code"

    try:
        yield app, registry, email, clock
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _, _, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)
