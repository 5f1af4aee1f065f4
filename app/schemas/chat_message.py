from enum import Enum
from pydantic import BaseModel, model_validator
from typing import Optional, List, Literal

from app.schemas.invoice import (
    InvoiceData,
    InvoiceStatus,
    ValidationResult,
    ClassificationResult,
    AIRecommendation,
    ERPResult,
)


class MessageType(str, Enum):
    TEXT = "text"
    FILE_UPLOAD = "file_upload"
    VALIDATION_RESULT = "validation_result"
    CLASSIFICATION_RESULT = "classification_result"
    AI_RECOMMENDATION = "ai_recommendation"
    ERP_RESULT = "erp_result"
    STATUS_UPDATE = "status_update"
    ERROR = "error"
    ACTION_BUTTONS = "action_buttons"


class MessageAction(BaseModel):
    label: str
    variant: Literal["default", "outline", "destructive"] = "default"
    action: str

    class Config:
        frozen = True


class MessageData(BaseModel):
    invoice: Optional[InvoiceData] = None
    validation: Optional[ValidationResult] = None
    classification: Optional[ClassificationResult] = None
    recommendation: Optional[AIRecommendation] = None
    erp: Optional[ERPResult] = None
    file_name: Optional[str] = None
    status: Optional[InvoiceStatus] = None
    actions: Optional[List[MessageAction]] = None

    class Config:
        frozen = True


# Campo de data que cada tipo de mensaje exige
REQUIRED_DATA_FIELD = {
    MessageType.FILE_UPLOAD: "file_name",
    MessageType.VALIDATION_RESULT: "validation",
    MessageType.CLASSIFICATION_RESULT: "classification",
    MessageType.AI_RECOMMENDATION: "recommendation",
    MessageType.ERP_RESULT: "erp",
    MessageType.STATUS_UPDATE: "status",
    MessageType.ACTION_BUTTONS: "actions",
}


class ChatMessage(BaseModel):
    id: str
    sender: Literal["bot", "user"]
    type: MessageType = MessageType.TEXT
    content: str
    timestamp: str
    data: Optional[MessageData] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_data_matches_type(self):
        field = REQUIRED_DATA_FIELD.get(self.type)
        if field and (self.data is None or getattr(self.data, field) is None):
            raise ValueError(f"Message of type '{self.type.value}' requires data.{field}")
        return self


class SendMessageRequest(BaseModel):
    content: str


class ActionRequest(BaseModel):
    action: str


class FileUploadRequest(BaseModel):
    file_name: Optional[str] = None
