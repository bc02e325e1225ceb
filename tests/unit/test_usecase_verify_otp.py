import pytest

from otp_auth.application.verify_otp import verify_otp
from otp_auth.domain.entities import VerifyOutcome
from otp_auth.domain.errors import InvalidOtpCode, MissingCode, MissingIdentity


@pytest.mark.asyncio
async def test_verify_otp_happy_path(registry):
    code = registry.issue("jeremy@example.com")

    await verify_otp(registry=registry, email=" Jeremy@Example.COM ", code=code)

    assert "jeremy@example.com" not in registry


@pytest.mark.asyncio
async def test_verify_otp_unknown_identity(registry):
    with pytest.raises(InvalidOtpCode) as ei:
        await verify_otp(registry=registry, email="a@x.com", code="123456")
    assert ei.value.outcome is VerifyOutcome.NOT_FOUND


@pytest.mark.asyncio
async def test_verify_otp_wrong_code(registry):
    registry.issue("a@x.com")
    with pytest.raises(InvalidOtpCode) as ei:
        await verify_otp(registry=registry, email="a@x.com", code="000000")
    assert ei.value.outcome is VerifyOutcome.MISMATCH
    assert "a@x.com" in registry


@pytest.mark.asyncio
async def test_verify_otp_expired(registry, clock):
    code = registry.issue("a@x.com")
    clock.advance(minutes=10)
    with pytest.raises(InvalidOtpCode) as ei:
        await verify_otp(registry=registry, email="a@x.com", code=code)
    assert ei.value.outcome is VerifyOutcome.EXPIRED
    assert "a@x.com" not in registry


@pytest.mark.asyncio
async def test_verify_otp_missing_inputs(registry):
    code = registry.issue("a@x.com")
    with pytest.raises(MissingIdentity):
        await verify_otp(registry=registry, email="  ", code=code)
    with pytest.raises(MissingCode):
        await verify_otp(registry=registry, email="a@x.com", code="")
    # validation failures never touch the record
    assert registry.get("a@x.com").code == code
