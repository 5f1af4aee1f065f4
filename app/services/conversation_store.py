from datetime import datetime
from typing import List, Optional
from sqlmodel import Session, select, delete, func
from app.models.conversation import Conversation
from app.models.chat_message import ConversationMessage
from app.schemas.chat_message import ChatMessage


class ConversationNotFound(LookupError):
    pass


def to_row(conversation_id: str, position: int, message: ChatMessage) -> ConversationMessage:
    return ConversationMessage(
        conversation_id=conversation_id,
        position=position,
        message_id=message.id,
        sender=message.sender,
        type=message.type.value,
        content=message.content,
        timestamp=message.timestamp,
        data=message.data.model_dump(mode="json", exclude_none=True) if message.data else None,
    )


def from_row(row: ConversationMessage) -> ChatMessage:
    return ChatMessage(
        id=row.message_id,
        sender=row.sender,
        type=row.type,
        content=row.content,
        timestamp=row.timestamp,
        data=row.data or None,
    )


class ConversationStore:
    """Registros de conversación y sus listas de mensajes."""

    def __init__(self, engine):
        self.engine = engine

    def list_conversations(self) -> List[Conversation]:
        with Session(self.engine) as session:
            return session.exec(
                select(Conversation).order_by(Conversation.created_at.desc())
            ).all()

    def get(self, conversation_id: str) -> Optional[Conversation]:
        with Session(self.engine) as session:
            return session.get(Conversation, conversation_id)

    def require(self, conversation_id: str) -> Conversation:
        conversation = self.get(conversation_id)
        if conversation is None:
            raise ConversationNotFound(conversation_id)
        return conversation

    def create(self, conversation_id: str, title: str, date: str, is_demo: bool = False,
               created_at: Optional[datetime] = None) -> Conversation:
        conversation = Conversation(
            id=conversation_id,
            title=title,
            date=date,
            is_demo=is_demo,
            created_at=created_at or datetime.utcnow(),
        )
        with Session(self.engine) as session:
            session.add(conversation)
            session.commit()
            session.refresh(conversation)
        return conversation

    def ensure(self, conversation_id: str, title: str, date: str, is_demo: bool = False,
               created_at: Optional[datetime] = None) -> Conversation:
        """Crea el registro sólo si no existe todavía."""
        existing = self.get(conversation_id)
        if existing is not None:
            return existing
        return self.create(conversation_id, title, date, is_demo=is_demo, created_at=created_at)

    def rename(self, conversation_id: str, title: str) -> None:
        with Session(self.engine) as session:
            conversation = session.get(Conversation, conversation_id)
            if conversation is None:
                raise ConversationNotFound(conversation_id)
            conversation.title = title
            conversation.updated_at = datetime.utcnow()
            session.add(conversation)
            session.commit()

    def load_messages(self, conversation_id: str) -> List[ChatMessage]:
        with Session(self.engine) as session:
            rows = session.exec(
                select(ConversationMessage)
                .where(ConversationMessage.conversation_id == conversation_id)
                .order_by(ConversationMessage.position)
            ).all()
            return [from_row(r) for r in rows]

    def replace_messages(self, conversation_id: str, messages: List[ChatMessage]) -> None:
        """Sobrescribe la lista de mensajes de la conversación."""
        with Session(self.engine) as session:
            session.exec(delete(ConversationMessage).where(ConversationMessage.conversation_id == conversation_id))
            for position, message in enumerate(messages):
                session.add(to_row(conversation_id, position, message))
            session.commit()

    def append_message(self, conversation_id: str, message: ChatMessage) -> None:
        with Session(self.engine) as session:
            last = session.exec(
                select(func.max(ConversationMessage.position))
                .where(ConversationMessage.conversation_id == conversation_id)
            ).first()
            position = 0 if last is None else last + 1
            session.add(to_row(conversation_id, position, message))
            session.commit()

