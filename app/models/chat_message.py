from typing import Optional, Dict, Any
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON

class ConversationMessage(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    conversation_id: str = Field(foreign_key="conversation.id", index=True)
    position: int                  # orden dentro de la conversación
    message_id: str
    sender: str                    # "bot" | "user"
    type: str
    content: str
    timestamp: str
    data: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
