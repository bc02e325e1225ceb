from pydantic import BaseModel, EmailStr, Field, field_validator


class OtpSendIn(BaseModel):
    email: EmailStr | None = Field(
        None, description="Address the code is sent to"
    )

    @field_validator("email", mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class OtpVerifyIn(BaseModel):
    email: EmailStr | None = Field(
        None, description="Address the code was sent to"
    )
    otp: str | None = Field(None, description="The 6-digit code", max_length=32)

    @field_validator("email", "otp", mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("otp", mode="before")
    @classmethod
    def number_as_text(cls, v):
        # clients often send the code as a JSON number
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
