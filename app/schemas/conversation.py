from pydantic import BaseModel
from datetime import datetime

class ConversationRead(BaseModel):
    id: str
    title: str
    date: str
    is_demo: bool
    created_at: datetime

    class Config:
        from_attributes = True
