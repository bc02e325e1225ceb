from otp_auth.domain.entities import VerifyOutcome
from otp_auth.domain.errors import InvalidOtpCode, MissingCode, MissingIdentity
from otp_auth.domain.registry import OtpRegistry
from otp_auth.domain.services import normalize_identity


async def verify_otp(
    registry: OtpRegistry,
    email: str | None,
    code: str | None,
) -> None:
    identity = normalize_identity(email)
    if not identity:
        raise MissingIdentity()
    if not code:
        raise MissingCode()

    outcome = registry.verify(identity, code)
    if outcome is not VerifyOutcome.VERIFIED:
        raise InvalidOtpCode(outcome)
