import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from otp_auth.application.send_otp import send_otp
from otp_auth.application.verify_otp import verify_otp
from otp_auth.domain.errors import DeliveryFailure, InvalidOtpCode, ValidationError
from otp_auth.domain.ports.email_port import EmailPort
from otp_auth.domain.registry import OtpRegistry
from otp_auth.presentation.dependencies import (
    get_email_port,
    get_email_subject,
    get_registry,
)
from otp_auth.schemas.requests import OtpSendIn, OtpVerifyIn
from otp_auth.schemas.responses import MessageOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/otp", tags=["OTP"])


@router.post("/send", response_model=MessageOut)
async def post_send_otp(
    body: OtpSendIn,
    registry: Annotated[OtpRegistry, Depends(get_registry)],
    email_port: Annotated[EmailPort, Depends(get_email_port)],
    subject: Annotated[str, Depends(get_email_subject)],
):
    try:
        await send_otp(
            registry=registry,
            email_port=email_port,
            email=body.email,
            subject=subject,
        )
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="email is required"
        )
    except DeliveryFailure as e:
        logger.error("otp delivery failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="failed to send OTP email",
        )

    return MessageOut(message="OTP has been sent to your email.")


@router.post("/verify", response_model=MessageOut)
async def post_verify_otp(
    body: OtpVerifyIn,
    registry: Annotated[OtpRegistry, Depends(get_registry)],
):
    try:
        await verify_otp(registry=registry, email=body.email, code=body.otp)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="email and otp are required",
        )
    except InvalidOtpCode:
        # not found, expired and mismatch all look the same to the caller
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid or expired code",
        )

    return MessageOut(message="OTP verified successfully.")
