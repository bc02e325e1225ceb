import asyncio
from contextlib import asynccontextmanager, suppress
from datetime import timedelta

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from otp_auth.domain.registry import OtpRegistry
from otp_auth.infrastructure.clock import SystemClock
from otp_auth.infrastructure.email.http_smtp_adapter import HttpSmtpEmailAdapter
from otp_auth.infrastructure.email.logging_adapter import LoggingEmailAdapter
from otp_auth.infrastructure.http.client import (
    close_http_client,
    open_http_client,
    get_http_client,
)
from otp_auth.infrastructure.sweeper import RegistrySweeper
from otp_auth.logging import setup_logging
from otp_auth.presentation.api import api
from otp_auth.settings import Settings, get_settings


def build_email_adapter(settings: Settings):
    if settings.email_backend == "log":
        return LoggingEmailAdapter()
    # One shared adapter on top of the shared HTTP client
    return HttpSmtpEmailAdapter(
        base_url=settings.smtp_base_url,
        client=get_http_client(),
        sender=settings.email_from,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # startup
    await open_http_client(timeout=settings.http_timeout_seconds)

    email_adapter = build_email_adapter(settings)
    app.state.email_adapter = email_adapter  # expose to dependencies

    sweeper_task = None
    if settings.otp_sweep_interval_seconds > 0:
        sweeper = RegistrySweeper(
            registry=app.state.otp_registry,
            interval=settings.otp_sweep_interval_seconds,
        )
        sweeper_task = asyncio.create_task(sweeper.run_forever())
    app.state.sweeper_task = sweeper_task

    try:
        yield
    finally:
        # shutdown
        if sweeper_task is not None:
            sweeper_task.cancel()
            with suppress(asyncio.CancelledError):
                await sweeper_task
        await email_adapter.aclose()  # it won't close the shared client
        await close_http_client()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title="OTP Auth API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.otp_registry = OtpRegistry(
        SystemClock(), ttl=timedelta(seconds=settings.otp_ttl_seconds)
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api)
    return app


app = create_app()
