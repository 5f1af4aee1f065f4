import logging
from datetime import datetime, timezone
from typing import Optional

from app.core.config import Settings
from app.services.reply_extraction import extract_reply
from app.utils.webhook_client import call_webhook

logger = logging.getLogger(__name__)


def relay_message(message: str, conversation_id: Optional[str] = None, settings: Optional[Settings] = None) -> str:
    """
    Reenvía un mensaje al webhook y normaliza la respuesta a texto plano.
    Propaga WebhookStatusError (respuesta no 2xx) y requests.RequestException
    (red o JSON inválido).
    """
    payload = {
        "message": message,
        "conversationId": conversation_id or None,
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }
    response = call_webhook(payload, settings)

    content_type = response.headers.get("content-type") or ""
    if "application/json" in content_type:
        reply = extract_reply(response.json())
    else:
        reply = response.text
    logger.debug("Webhook reply for conversation %s: %d chars", conversation_id, len(reply))
    return reply
