import logging
import os
from typing import Any, Dict, Optional

import requests
from app.core.config import Settings


logger = logging.getLogger(__name__)


class WebhookError(Exception):
    """Fallo al comunicarse con el webhook de automatización."""


class WebhookStatusError(WebhookError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"Webhook responded with status {status_code}")
        self.status_code = status_code
        self.body = body


def call_webhook(payload: Dict[str, Any], settings: Optional[Settings] = None) -> requests.Response:
    """Envía el payload al webhook configurado y devuelve la respuesta (2xx)."""
    if settings is None:
        settings = Settings()
    url = os.environ.get("WEBHOOK_URL") or settings.webhook_url

    response = requests.post(
        url,
        json=payload,
        headers={"Content-Type": "application/json"},
        timeout=settings.webhook_timeout,
    )
    if not response.ok:
        logger.error("Webhook request failed: %s %s", response.status_code, response.text)
        raise WebhookStatusError(response.status_code, response.text)
    return response
