import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, Optional

import requests
from starlette.concurrency import run_in_threadpool

from app.models.conversation import Conversation
from app.schemas.chat_message import ChatMessage, MessageData, MessageType
from app.services import fixtures
from app.services.conversation_store import ConversationStore
from app.services.formatting import derive_title, format_assistant_text
from app.services.relay import relay_message
from app.services.scheduler import Scheduler
from app.services.sequencer import DemoSequencer
from app.services.session_state import DEMO_MODE, LIVE_MODE, SessionState
from app.utils.webhook_client import WebhookError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Nueva conversación"
LIVE_PROCESSING_TEXT = "Analizando consulta..."
RELAY_FAILURE_NOTICE = (
    "Lo siento, no pude comunicarme con el servicio de IA en este momento. "
    "Por favor, intenta enviar tu mensaje de nuevo."
)
DEFAULT_UPLOAD_NAME = "factura_ejemplo.xml"

Dispatch = Callable[[str, Optional[str]], str]


def now_label() -> str:
    return datetime.now().strftime("%H:%M")


def today_label() -> str:
    return f"Hoy, {now_label()}"


def new_message_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class ChatController:
    """
    Dueño único del estado de la sesión: modo demo (vía DemoSequencer) y
    conversación real con el webhook. Toda mutación pasa por sus métodos y
    debe ejecutarse en el hilo del event loop.
    """

    def __init__(
        self,
        store: ConversationStore,
        scheduler: Scheduler,
        dispatch: Optional[Dispatch] = None,
        state: Optional[SessionState] = None,
    ):
        self.store = store
        self.state = state or SessionState()
        self.sequencer = DemoSequencer(self.state, scheduler)
        self.dispatch = dispatch or relay_message

    # ---------- helpers ----------
    def _is_live(self) -> bool:
        return self.state.mode == LIVE_MODE and self.state.active_conversation_id is not None

    def _append(self, message: ChatMessage) -> None:
        self.state.messages = self.state.messages + [message]
        self._persist()

    def _persist(self) -> None:
        # write-through: la lista guardada se sobrescribe entera
        if self._is_live():
            self.store.replace_messages(self.state.active_conversation_id, self.state.messages)

    def _reset(self) -> None:
        self.sequencer.reset()

    # ---------- conversaciones ----------
    def new_conversation(self) -> Conversation:
        self._reset()
        conversation = self.store.create(new_message_id("conv"), DEFAULT_TITLE, today_label())
        self.state.mode = LIVE_MODE
        self.state.active_conversation_id = conversation.id
        logger.info("Started conversation %s", conversation.id)
        return conversation

    def select_conversation(self, conversation_id: str) -> None:
        conversation = self.store.require(conversation_id)
        if conversation.is_demo:
            self.enter_demo()
            return
        self._reset()
        self.state.mode = LIVE_MODE
        self.state.messages = self.store.load_messages(conversation_id)
        self.state.active_conversation_id = conversation_id
        logger.info("Selected conversation %s (%d messages)", conversation_id, len(self.state.messages))

    def enter_demo(self) -> None:
        self._reset()
        demo = fixtures.DEMO_CONVERSATIONS[0]
        self.store.ensure(demo["id"], demo["title"], demo["date"], is_demo=True)
        self.state.mode = DEMO_MODE
        self.state.active_conversation_id = demo["id"]
        self.sequencer.start()
        logger.info("Entered demo mode")

    def advance_demo(self) -> bool:
        if self.state.mode != DEMO_MODE:
            return False
        return self.sequencer.advance()

    def close(self) -> None:
        self.sequencer.close()

    # ---------- mensajes ----------
    async def send_message(self, content: str) -> ChatMessage:
        """Añade el mensaje del usuario y lo reenvía al webhook; devuelve el mensaje del bot."""
        if self.state.active_conversation_id is None or self.state.mode == DEMO_MODE:
            self.new_conversation()
        conversation_id = self.state.active_conversation_id

        # el título sale de la lista en memoria, no del registro guardado
        is_first = not any(m.sender == "user" for m in self.state.messages)
        self._append(ChatMessage(
            id=new_message_id("user"),
            sender="user",
            content=content,
            timestamp=now_label(),
        ))
        if is_first:
            self.store.rename(conversation_id, derive_title(content))

        self.state.processing = True
        self.state.processing_text = LIVE_PROCESSING_TEXT

        try:
            raw = await run_in_threadpool(self.dispatch, content, conversation_id)
            reply = ChatMessage(
                id=new_message_id("bot"),
                sender="bot",
                content=format_assistant_text(raw),
                timestamp=now_label(),
            )
        except (WebhookError, requests.RequestException):
            logger.exception("Relay failed for conversation %s", conversation_id)
            reply = ChatMessage(
                id=new_message_id("error"),
                sender="bot",
                type=MessageType.ERROR,
                content=RELAY_FAILURE_NOTICE,
                timestamp=now_label(),
            )

        if self.state.active_conversation_id != conversation_id:
            # el usuario cambió de conversación mientras se esperaba la respuesta
            logger.info("Reply for inactive conversation %s stored without display", conversation_id)
            self.store.append_message(conversation_id, reply)
            return reply

        self.state.processing = False
        self.state.processing_text = None
        self._append(reply)
        return reply

    def handle_action(self, action: str) -> Optional[ChatMessage]:
        if action == "aprobar" and self.state.mode == DEMO_MODE and not self.sequencer.finished:
            # la demo continúa sola tras la aprobación
            return None
        message = ChatMessage(
            id=new_message_id("action"),
            sender="user",
            content=f"Acción seleccionada: {action}",
            timestamp=now_label(),
        )
        self._append(message)
        return message

    def handle_file_upload(self, file_name: Optional[str] = None) -> ChatMessage:
        message = ChatMessage(
            id=new_message_id("upload"),
            sender="user",
            type=MessageType.FILE_UPLOAD,
            content="Archivo adjuntado.",
            timestamp=now_label(),
            data=MessageData(file_name=file_name or DEFAULT_UPLOAD_NAME),
        )
        self._append(message)
        return message


def seed_demo_conversations(store: ConversationStore) -> None:
    """Registra el historial de ejemplo de la barra lateral (una sola vez)."""
    base = datetime.utcnow()
    for offset, conv in enumerate(fixtures.DEMO_CONVERSATIONS):
        store.ensure(
            conv["id"],
            conv["title"],
            conv["date"],
            is_demo=conv.get("is_demo", False),
            created_at=base - timedelta(minutes=offset),
        )

