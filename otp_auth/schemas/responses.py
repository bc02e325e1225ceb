from typing import Literal

from pydantic import BaseModel, Field


class MessageOut(BaseModel):
    message: str = Field(..., description="Human readable result")


class HealthOut(BaseModel):
    status: Literal["ok"] = "ok"
