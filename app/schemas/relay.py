from pydantic import BaseModel


class RelayReply(BaseModel):
    reply: str


class RelayErrorResponse(BaseModel):
    error: str
