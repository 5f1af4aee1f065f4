import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.schemas.chat_message import ChatMessage
from app.schemas.invoice import InvoiceStatus
from app.services import fixtures
from app.services.scheduler import ManualScheduler
from app.services.sequencer import DemoSequencer
from app.services.session_state import SessionState


def make_sequencer():
    scheduler = ManualScheduler()
    state = SessionState()
    return DemoSequencer(state, scheduler), state, scheduler


def advance_times(sequencer, scheduler, times):
    for _ in range(times):
        sequencer.advance()
        scheduler.run_all()


def test_advancing_reveals_script_prefix_in_order():
    script, _ = fixtures.get_demo_messages()
    for step in range(len(script)):
        sequencer, state, scheduler = make_sequencer()
        advance_times(sequencer, scheduler, step + 1)
        assert state.messages == script[: step + 1]
        assert state.demo_step == step + 1


def test_advance_is_noop_when_finished():
    sequencer, state, scheduler = make_sequencer()
    advance_times(sequencer, scheduler, 12)
    assert sequencer.finished
    assert sequencer.advance() is False
    assert len(state.messages) == 12


def test_user_messages_and_first_bot_message_are_immediate():
    sequencer, state, scheduler = make_sequencer()
    sequencer.advance()
    assert len(state.messages) == 1
    assert state.processing is False
    sequencer.advance()
    assert state.messages[-1].sender == "user"
    assert scheduler.pending == 0


def test_bot_message_shows_processing_until_delay_elapses():
    sequencer, state, scheduler = make_sequencer()
    advance_times(sequencer, scheduler, 2)

    assert sequencer.advance() is True
    assert state.processing is True
    assert state.processing_text == "Analizando solicitud..."
    assert len(state.messages) == 2

    # mientras se revela, un nuevo avance se ignora
    assert sequencer.advance() is False

    scheduler.advance(599)
    assert state.processing is True
    scheduler.advance(1)
    assert state.processing is False
    assert state.processing_text is None
    assert [m.id for m in state.messages] == ["msg-1", "msg-2", "msg-3"]


def test_default_processing_text_and_delay():
    script = [
        ChatMessage(id="a", sender="bot", content="uno", timestamp="10:00"),
        ChatMessage(id="b", sender="bot", content="dos", timestamp="10:01"),
    ]
    scheduler = ManualScheduler()
    state = SessionState()
    sequencer = DemoSequencer(state, scheduler, script=script, delays=[0, 0])

    sequencer.advance()
    sequencer.advance()
    assert state.processing_text == fixtures.DEFAULT_PROCESSING_TEXT
    scheduler.advance(999)
    assert len(state.messages) == 1
    scheduler.advance(1)
    assert len(state.messages) == 2


def test_invoice_status_and_panel_snapshots():
    sequencer, state, scheduler = make_sequencer()
    advance_times(sequencer, scheduler, 3)
    assert state.invoice is None

    advance_times(sequencer, scheduler, 1)
    assert state.invoice.status == InvoiceStatus.RECEIVED
    assert state.invoice.folio == "A-4521"

    advance_times(sequencer, scheduler, 2)
    assert state.invoice.status == InvoiceStatus.VALIDATED
    assert state.validation == fixtures.DEMO_VALIDATION
    assert state.classification is None

    advance_times(sequencer, scheduler, 1)
    assert state.classification == fixtures.DEMO_CLASSIFICATION
    advance_times(sequencer, scheduler, 1)
    assert state.recommendation == fixtures.DEMO_RECOMMENDATION
    assert state.invoice.status == InvoiceStatus.APPROVED

    advance_times(sequencer, scheduler, 4)
    assert state.invoice.status == InvoiceStatus.SENT_TO_ERP
    assert state.erp == fixtures.DEMO_ERP_RESULT
    # la factura de ejemplo nunca se modifica
    assert fixtures.DEMO_INVOICE.status == InvoiceStatus.RECEIVED


def test_audit_log_is_derived_from_step():
    sequencer, state, scheduler = make_sequencer()
    advance_times(sequencer, scheduler, 5)
    assert state.audit_log == fixtures.get_demo_audit_log(4)
    assert len(state.audit_log) == 5

    advance_times(sequencer, scheduler, 7)
    assert state.audit_log == fixtures.get_demo_audit_log(11)
    assert [e.id for e in state.audit_log] == [f"aud-{i}" for i in range(1, 8)]


def test_auto_drive_timing():
    sequencer, state, scheduler = make_sequencer()
    sequencer.start()

    scheduler.advance(499)
    assert state.messages == []
    scheduler.advance(1)
    assert len(state.messages) == 1

    scheduler.advance(1200)
    assert len(state.messages) == 2

    # paso 2: tick a los 1200 ms y revelación 600 ms después
    scheduler.advance(1200)
    assert state.processing is True
    assert len(state.messages) == 2
    scheduler.advance(600)
    assert len(state.messages) == 3
    assert state.processing is False

    scheduler.run_all()
    assert sequencer.finished
    assert len(state.messages) == 12
    assert scheduler.pending == 0


def test_auto_drive_does_not_run_before_start():
    sequencer, state, scheduler = make_sequencer()
    scheduler.advance(10000)
    assert state.messages == []
    assert scheduler.pending == 0


def test_manual_advance_replaces_pending_tick():
    sequencer, state, scheduler = make_sequencer()
    sequencer.start()
    assert scheduler.pending == 1

    sequencer.advance()
    assert len(state.messages) == 1
    assert scheduler.pending == 1

    scheduler.advance(500)
    assert len(state.messages) == 1
    scheduler.advance(700)
    assert len(state.messages) == 2


def test_reset_clears_state_and_cancels_timers():
    sequencer, state, scheduler = make_sequencer()
    sequencer.start()
    scheduler.advance(500 + 1200 + 1200)
    assert state.processing is True

    sequencer.reset()
    assert state.messages == []
    assert state.processing is False
    assert state.processing_text is None
    assert state.demo_step == 0
    assert state.demo_started is False
    assert state.audit_log == []
    assert scheduler.pending == 0

    scheduler.run_all()
    assert state.messages == []
