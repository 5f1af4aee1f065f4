import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest
from pydantic import ValidationError

from app.schemas.chat_message import ChatMessage, MessageData, MessageType
from app.schemas.invoice import InvoiceStatus
from app.services import fixtures


def test_typed_message_requires_matching_data():
    with pytest.raises(ValidationError):
        ChatMessage(id="m", sender="bot", type=MessageType.VALIDATION_RESULT, content="x", timestamp="10:00")
    with pytest.raises(ValidationError):
        ChatMessage(
            id="m", sender="bot", type=MessageType.ERP_RESULT, content="x", timestamp="10:00",
            data=MessageData(validation=fixtures.DEMO_VALIDATION),
        )


def test_text_and_error_messages_need_no_data():
    ChatMessage(id="m1", sender="user", content="hola", timestamp="10:00")
    ChatMessage(id="m2", sender="bot", type=MessageType.ERROR, content="fallo", timestamp="10:00")


def test_sender_is_restricted():
    with pytest.raises(ValidationError):
        ChatMessage(id="m", sender="ai", content="x", timestamp="10:00")


def test_messages_are_immutable():
    message = ChatMessage(id="m", sender="user", content="hola", timestamp="10:00")
    with pytest.raises(ValidationError):
        message.content = "otro"


def test_invoice_status_update_returns_new_record():
    updated = fixtures.DEMO_INVOICE.with_status(InvoiceStatus.VALIDATING)
    assert updated is not fixtures.DEMO_INVOICE
    assert updated.status == InvoiceStatus.VALIDATING
    assert updated.folio == fixtures.DEMO_INVOICE.folio
    assert fixtures.DEMO_INVOICE.status == InvoiceStatus.RECEIVED


def test_demo_script_is_consistent():
    messages, delays = fixtures.get_demo_messages()
    assert len(messages) == len(delays) == len(fixtures.STATUS_PROGRESSION) == 12
    assert messages[fixtures.VALIDATION_STEP].type == MessageType.VALIDATION_RESULT
    assert messages[fixtures.CLASSIFICATION_STEP].type == MessageType.CLASSIFICATION_RESULT
    assert messages[fixtures.RECOMMENDATION_STEP].type == MessageType.AI_RECOMMENDATION
    assert messages[fixtures.ERP_STEP].type == MessageType.ERP_RESULT


def test_audit_log_prefix_sizes():
    sizes = [len(fixtures.get_demo_audit_log(step)) for step in range(12)]
    assert sizes == [0, 1, 2, 3, 5, 5, 6, 7, 7, 7, 7, 7]
    full = fixtures.get_demo_audit_log(20)
    assert fixtures.get_demo_audit_log(3) == full[:3]
