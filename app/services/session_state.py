from dataclasses import dataclass, field
from typing import List, Optional

from app.schemas.chat_message import ChatMessage
from app.schemas.invoice import (
    AIRecommendation,
    AuditEntry,
    ClassificationResult,
    ERPResult,
    InvoiceData,
    ValidationResult,
)

DEMO_MODE = "demo"
LIVE_MODE = "live"


@dataclass
class SessionState:
    """Estado mutable de la sesión de chat; sólo lo modifica el ChatController."""

    mode: str = LIVE_MODE
    active_conversation_id: Optional[str] = None
    messages: List[ChatMessage] = field(default_factory=list)
    processing: bool = False
    processing_text: Optional[str] = None
    invoice: Optional[InvoiceData] = None
    validation: Optional[ValidationResult] = None
    classification: Optional[ClassificationResult] = None
    recommendation: Optional[AIRecommendation] = None
    erp: Optional[ERPResult] = None
    audit_log: List[AuditEntry] = field(default_factory=list)
    demo_step: int = 0
    demo_started: bool = False

    def reset(self) -> None:
        self.messages = []
        self.processing = False
        self.processing_text = None
        self.invoice = None
        self.validation = None
        self.classification = None
        self.recommendation = None
        self.erp = None
        self.audit_log = []
        self.demo_step = 0
        self.demo_started = False
