from pydantic import BaseModel
from typing import Optional, List, Literal

from app.schemas.chat_message import ChatMessage
from app.schemas.invoice import (
    InvoiceData,
    ValidationResult,
    ClassificationResult,
    AIRecommendation,
    ERPResult,
    AuditEntry,
)


class SessionRead(BaseModel):
    mode: Literal["demo", "live"]
    active_conversation_id: Optional[str] = None
    messages: List[ChatMessage]
    processing: bool
    processing_text: Optional[str] = None
    invoice: Optional[InvoiceData] = None
    validation: Optional[ValidationResult] = None
    classification: Optional[ClassificationResult] = None
    recommendation: Optional[AIRecommendation] = None
    erp: Optional[ERPResult] = None
    audit_log: List[AuditEntry]
    demo_step: int
    demo_started: bool

    class Config:
        from_attributes = True
