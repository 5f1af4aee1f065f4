# schemas/invoice.py

from enum import Enum
from pydantic import BaseModel
from typing import List, Literal


class InvoiceStatus(str, Enum):
    RECEIVED = "recibida"
    VALIDATING = "validando"
    VALIDATED = "validada"
    CLASSIFYING = "clasificando"
    CLASSIFIED = "clasificada"
    RECOMMENDING = "recomendando"
    APPROVED = "aprobada"
    SENDING_TO_ERP = "enviando_erp"
    SENT_TO_ERP = "enviada_erp"
    ERROR = "error"


class InvoiceLineItem(BaseModel):
    description: str
    quantity: float
    unit_value: float
    amount: float

    class Config:
        frozen = True


class InvoiceData(BaseModel):
    id: str
    folio: str
    issuer: str
    receiver: str
    issuer_rfc: str
    receiver_rfc: str
    date: str
    subtotal: float
    tax: float                 # IVA
    total: float
    currency: str
    uuid: str                  # folio fiscal
    status: InvoiceStatus
    voucher_type: str
    line_items: List[InvoiceLineItem] = []

    class Config:
        frozen = True

    def with_status(self, status: InvoiceStatus) -> "InvoiceData":
        """Devuelve una copia completa con el nuevo estado."""
        return self.model_copy(update={"status": status})


class ValidationCheck(BaseModel):
    name: str
    passed: bool
    detail: str

    class Config:
        frozen = True


class ValidationResult(BaseModel):
    is_valid: bool
    checks: List[ValidationCheck]
    score: int

    class Config:
        frozen = True


class ClassificationResult(BaseModel):
    account: str
    account_description: str
    cost_center: str
    category: str
    confidence: int

    class Config:
        frozen = True


class AIRecommendation(BaseModel):
    action: Literal["aprobar", "revisar", "rechazar"]
    confidence: int
    reasoning: str
    flags: List[str] = []

    class Config:
        frozen = True


class ERPResult(BaseModel):
    success: bool
    erp_id: str
    timestamp: str
    module: str
    message: str

    class Config:
        frozen = True


class AuditEntry(BaseModel):
    id: str
    timestamp: str
    action: str
    detail: str
    user: str
    status: Literal["success", "warning", "error", "info"]

    class Config:
        frozen = True
