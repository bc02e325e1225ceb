import logging
from datetime import timedelta

from otp_auth.domain.errors import MissingIdentity
from otp_auth.domain.ports.email_port import EmailPort
from otp_auth.domain.registry import OtpRegistry
from otp_auth.domain.services import normalize_identity

logger = logging.getLogger(__name__)


def describe_validity(ttl: timedelta) -> str:
    """'5 minutes', '1 minute', or seconds when the window is not whole minutes."""
    seconds = int(ttl.total_seconds())
    if seconds % 60 == 0:
        minutes = seconds // 60
        return f"{minutes} minute" if minutes == 1 else f"{minutes} minutes"
    return f"{seconds} second" if seconds == 1 else f"{seconds} seconds"


async def send_otp(
    registry: OtpRegistry,
    email_port: EmailPort,
    email: str | None,
    subject: str = "Your OTP Code",
) -> None:
    identity = normalize_identity(email)
    if not identity:
        raise MissingIdentity()

    code = registry.issue(identity)

    # A failed send leaves the issued record in place; the user can ask again.
    await email_port.send(
        to=identity,
        subject=subject,
        body=f"Your OTP is: {code} (valid for {describe_validity(registry.ttl)})",
    )
    logger.info("otp sent", extra={"identity": identity})
