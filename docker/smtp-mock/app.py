import logging
import sys

from fastapi import FastAPI, Request, Response, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field

logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)sZ %(levelname)s %(message)s")

app = FastAPI(title="Mail Relay Mock", version="1.0.0")

# Last messages received, newest last; lets a developer read codes in dev.
OUTBOX: list[dict] = []
OUTBOX_LIMIT = 100


class SendEmail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to: EmailStr
    subject: str
    body: str
    sender: str | None = Field(None, alias="from")


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/messages")
def messages() -> list[dict]:
    return OUTBOX


@app.post("/send", status_code=status.HTTP_202_ACCEPTED)
async def send(payload: SendEmail, request: Request) -> Response:
    idem = request.headers.get("Idempotency-Key")
    logging.info("MAIL-MOCK send to=%s from=%s subject=%r idem=%s", payload.to, payload.sender, payload.subject, idem)
    OUTBOX.append(payload.model_dump(by_alias=True))
    del OUTBOX[:-OUTBOX_LIMIT]
    return Response(status_code=status.HTTP_202_ACCEPTED)
