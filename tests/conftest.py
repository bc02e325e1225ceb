from datetime import timedelta

import pytest

from otp_auth.domain.registry import OtpRegistry
from tests.fakes import FakeClock, FakeEmailDown, FakeEmailOK, ScriptedRandom


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def rng():
    return ScriptedRandom([123456, 654321, 111111])


@pytest.fixture()
def registry(clock, rng):
    return OtpRegistry(clock, rng=rng, ttl=timedelta(minutes=5))


@pytest.fixture()
def email_ok():
    return FakeEmailOK()


@pytest.fixture()
def email_down():
    return FakeEmailDown()
