from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime

class Conversation(SQLModel, table=True):
    id: str = Field(primary_key=True)
    title: str
    date: str                      # fecha para mostrar, ej. "Hoy, 14:25"
    is_demo: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None
