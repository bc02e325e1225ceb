from fastapi import Request

from otp_auth.domain.ports.email_port import EmailPort
from otp_auth.domain.registry import OtpRegistry
from otp_auth.settings import get_settings


def get_registry(request: Request) -> OtpRegistry:
    # Created in otp_auth.main.create_app()
    return request.app.state.otp_registry


def get_email_port(request: Request) -> EmailPort:
    # This is set in otp_auth.main lifespan()
    return request.app.state.email_adapter


def get_email_subject() -> str:
    return get_settings().email_subject
