"""
Temporizadores del secuenciador.

`AsyncioScheduler` programa callbacks en el event loop del servicio;
`ManualScheduler` avanza un reloj virtual para las pruebas.
"""

import asyncio
import heapq
import itertools
from typing import Callable, List, Optional, Tuple


class TimerHandle:
    def __init__(self, cancel: Optional[Callable[[], None]] = None):
        self._cancel = cancel
        self.cancelled = False

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        if self._cancel is not None:
            self._cancel()


class Scheduler:
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        raise NotImplementedError


class AsyncioScheduler(Scheduler):
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        handle = loop.call_later(delay_ms / 1000, callback)
        return TimerHandle(handle.cancel)


class ManualScheduler(Scheduler):
    def __init__(self):
        self.now_ms = 0
        self._queue: List[Tuple[int, int, TimerHandle, Callable[[], None]]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle()
        heapq.heappush(self._queue, (self.now_ms + delay_ms, next(self._seq), handle, callback))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, handle, _ in self._queue if not handle.cancelled)

    def advance(self, ms: int) -> None:
        """Avanza el reloj `ms` milisegundos ejecutando los callbacks vencidos en orden."""
        target = self.now_ms + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback = heapq.heappop(self._queue)
            self.now_ms = due
            if handle.cancelled:
                continue
            handle.cancelled = True
            callback()
        self.now_ms = target

    def run_all(self, limit: int = 1000) -> None:
        """Ejecuta todo lo pendiente, incluidos los callbacks que se programen al vuelo."""
        for _ in range(limit):
            live = [item for item in self._queue if not item[2].cancelled]
            if not live:
                return
            self.advance(min(item[0] for item in live) - self.now_ms)
        raise RuntimeError("Scheduler did not settle")
