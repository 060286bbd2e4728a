from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.cors import install_cors
from config.settings import get_settings
from relay import relay_chat
from relay.errors import InvalidRequest, RelayError, UnexpectedError


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("nutriguide")

app = FastAPI(title="NutriGuide Chat Relay", version="1.0.0")
install_cors(app)


class ChatTurn(BaseModel):
    role: str = Field(..., description="'user' or 'assistant'")
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatTurn] = Field(
        ..., description="Full conversation so far, oldest first (frontend-managed)"
    )


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid chat request: %s", exc.errors())
    error = InvalidRequest()
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


@app.post("/nutriguide-chat")
def chat(req: ChatRequest) -> Dict[str, Any]:
    try:
        reply = relay_chat([t.model_dump() for t in req.messages], settings=get_settings())
    except RelayError:
        raise
    except Exception as e:
        logger.exception("Error in nutriguide-chat handler: %s", e)
        raise UnexpectedError() from e
    return {"response": reply}


@app.get("/health")
def health():
    return {"status": "ok"}
