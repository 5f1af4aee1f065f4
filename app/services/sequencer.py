"""
Secuenciador del modo demo.

Revela el guion de mensajes uno a uno sobre el SessionState. Los mensajes del
bot (salvo el primero) muestran antes un indicador de "procesando" durante el
retardo configurado; los del usuario aparecen de inmediato. Mientras la demo
está arrancada y no hay nada en curso, se programa el siguiente avance.
"""

import logging
from typing import List, Optional

from app.schemas.chat_message import ChatMessage
from app.services import fixtures
from app.services.scheduler import Scheduler, TimerHandle
from app.services.session_state import SessionState

logger = logging.getLogger(__name__)

FIRST_TICK_MS = 500
TICK_MS = 1200


class DemoSequencer:
    def __init__(
        self,
        state: SessionState,
        scheduler: Scheduler,
        script: Optional[List[ChatMessage]] = None,
        delays: Optional[List[int]] = None,
    ):
        if script is None:
            script, default_delays = fixtures.get_demo_messages()
            delays = delays if delays is not None else default_delays
        self.state = state
        self.scheduler = scheduler
        self.script = script
        self.delays = delays or []
        self._tick: Optional[TimerHandle] = None
        self._reveal: Optional[TimerHandle] = None

    @property
    def finished(self) -> bool:
        return self.state.demo_step >= len(self.script)

    def start(self) -> None:
        self.state.demo_started = True
        self._schedule_next()

    def reset(self) -> None:
        self._cancel_timers()
        self.state.reset()

    def close(self) -> None:
        self._cancel_timers()

    def advance(self) -> bool:
        """Avanza un paso del guion. Devuelve False si no había nada que hacer."""
        if self.finished or self.state.processing:
            return False
        self._cancel_tick()

        step = self.state.demo_step
        message = self.script[step]
        if message.sender == "bot" and step > 0:
            self.state.processing = True
            self.state.processing_text = fixtures.PROCESSING_TEXTS.get(step, fixtures.DEFAULT_PROCESSING_TEXT)
            delay = self._delay_for(step)
            logger.debug("Demo step %d: revealing bot message in %d ms", step, delay)
            self._reveal = self.scheduler.call_later(delay, lambda: self._complete_reveal(step))
            return True

        self._apply_step(step)
        return True

    def _delay_for(self, step: int) -> int:
        delay = self.delays[step] if step < len(self.delays) else 0
        return delay or fixtures.DEFAULT_REVEAL_DELAY_MS

    def _complete_reveal(self, step: int) -> None:
        self._reveal = None
        # Un reset entre medias invalida la revelación
        if self.state.demo_step != step or not self.state.processing:
            return
        self.state.processing = False
        self.state.processing_text = None
        self._apply_step(step)

    def _apply_step(self, step: int) -> None:
        state = self.state
        state.messages = state.messages + [self.script[step]]

        status = fixtures.STATUS_PROGRESSION[step] if step < len(fixtures.STATUS_PROGRESSION) else None
        if status is not None:
            if state.invoice is None and step >= 3:
                state.invoice = fixtures.DEMO_INVOICE.with_status(status)
            elif state.invoice is not None:
                state.invoice = state.invoice.with_status(status)

        if step == fixtures.VALIDATION_STEP:
            state.validation = fixtures.DEMO_VALIDATION
        if step == fixtures.CLASSIFICATION_STEP:
            state.classification = fixtures.DEMO_CLASSIFICATION
        if step == fixtures.RECOMMENDATION_STEP:
            state.recommendation = fixtures.DEMO_RECOMMENDATION
        if step == fixtures.ERP_STEP:
            state.erp = fixtures.DEMO_ERP_RESULT

        state.audit_log = fixtures.get_demo_audit_log(step)
        state.demo_step = step + 1
        if self.finished:
            logger.info("Demo script completed (%d messages)", len(self.script))
        self._schedule_next()

    def _schedule_next(self) -> None:
        self._cancel_tick()
        state = self.state
        if not state.demo_started or self.finished or state.processing:
            return
        interval = FIRST_TICK_MS if state.demo_step == 0 else TICK_MS
        self._tick = self.scheduler.call_later(interval, self._on_tick)

    def _on_tick(self) -> None:
        self._tick = None
        self.advance()

    def _cancel_tick(self) -> None:
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None

    def _cancel_timers(self) -> None:
        self._cancel_tick()
        if self._reveal is not None:
            self._reveal.cancel()
            self._reveal = None
