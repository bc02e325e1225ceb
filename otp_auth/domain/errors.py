from otp_auth.domain.entities import VerifyOutcome


class DomainError(Exception):
    """Base class for all domain-level errors."""

    pass


class ValidationError(DomainError):
    """Request input is missing or malformed; never reaches the registry."""

    pass


class MissingIdentity(ValidationError):
    """No email (identity) was supplied."""

    pass


class MissingCode(ValidationError):
    """No OTP code was supplied for verification."""

    pass


class InvalidOtpCode(DomainError):
    """Verification did not succeed (not found, expired or mismatched)."""

    def __init__(self, outcome: VerifyOutcome) -> None:
        super().__init__(outcome.value)
        self.outcome = outcome


class DeliveryFailure(DomainError):
    """The email sender could not deliver the code."""

    pass
