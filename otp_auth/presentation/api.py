from fastapi import APIRouter

from otp_auth.presentation.routers.v1.otp import router as otp_router
from otp_auth.presentation.routes.health import router as health_router

api = APIRouter()

# Add all v1 routers here
routers = (otp_router,)
for router in routers:
    api.include_router(router, prefix="/v1")

api.include_router(health_router)
