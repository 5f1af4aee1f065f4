from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select
from typing import List

from app.api.deps import get_controller
from app.api.endpoints.session import snapshot
from app.database import get_session
from app.models.conversation import Conversation
from app.models.chat_message import ConversationMessage
from app.schemas.chat_message import ChatMessage
from app.schemas.conversation import ConversationRead
from app.schemas.session import SessionRead
from app.services.chat_controller import ChatController
from app.services.conversation_store import ConversationNotFound, from_row

router = APIRouter()


@router.get("/", response_model=List[ConversationRead])
def list_conversations(session: Session = Depends(get_session)):
    return session.exec(
        select(Conversation).order_by(Conversation.created_at.desc())
    ).all()


@router.post("/", response_model=ConversationRead, status_code=status.HTTP_201_CREATED)
async def create_conversation(controller: ChatController = Depends(get_controller)):
    return controller.new_conversation()


@router.post("/{conversation_id}/select", response_model=SessionRead)
async def select_conversation(
    conversation_id: str,
    controller: ChatController = Depends(get_controller),
):
    try:
        controller.select_conversation(conversation_id)
    except ConversationNotFound:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return snapshot(controller)


@router.get("/{conversation_id}/messages", response_model=List[ChatMessage])
def get_conversation_messages(
    conversation_id: str,
    session: Session = Depends(get_session),
):
    if not session.get(Conversation, conversation_id):
        raise HTTPException(status_code=404, detail="Conversation not found")
    rows = session.exec(
        select(ConversationMessage)
        .where(ConversationMessage.conversation_id == conversation_id)
        .order_by(ConversationMessage.position)
    ).all()
    return [from_row(r) for r in rows]
