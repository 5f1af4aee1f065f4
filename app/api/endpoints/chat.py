import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.core.config import Settings
from app.schemas.relay import RelayErrorResponse, RelayReply
from app.services.relay import relay_message
from app.utils.webhook_client import WebhookStatusError

router = APIRouter()
logger = logging.getLogger(__name__)
settings = Settings()

MISSING_MESSAGE = "El campo 'message' es requerido."
UPSTREAM_FAILURE = "Error al comunicarse con el servicio de IA."
INTERNAL_FAILURE = "Error interno del servidor."


def error_response(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": detail})


@router.post(
    "",
    response_model=RelayReply,
    responses={400: {"model": RelayErrorResponse}, 502: {"model": RelayErrorResponse}, 500: {"model": RelayErrorResponse}},
)
async def relay_chat(request: Request):
    """
    Reenvía el mensaje al webhook de automatización:
    - 400 si falta `message` o no es texto
    - 502 si el webhook responde con error
    - 500 ante cualquier otro fallo (red, JSON inválido...)
    """
    try:
        body = await request.json()
        message = body.get("message") if isinstance(body, dict) else None
        if not message or not isinstance(message, str):
            return error_response(400, MISSING_MESSAGE)

        reply = await run_in_threadpool(relay_message, message, body.get("conversationId") or None, settings)
        return RelayReply(reply=reply)
    except WebhookStatusError:
        return error_response(502, UPSTREAM_FAILURE)
    except Exception:
        logger.exception("Relay chat error")
        return error_response(500, INTERNAL_FAILURE)
