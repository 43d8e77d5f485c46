"""The divider and timer registers."""

from __future__ import annotations

from .irq import Interrupt, IrqHandler
from .memory import Memory

DIV = 0xFF04
TIMA = 0xFF05
TMA = 0xFF06
TAC = 0xFF07

DIVIDER_PERIOD = 256
_TIMER_PERIODS = {0x00: 1024, 0x01: 16, 0x02: 64, 0x03: 256}


class TimerClock:
    """Counts cycles and reports one tick for every ``period`` cycles."""

    __slots__ = ("period", "_counter")

    def __init__(self, period: int) -> None:
        self.period = period
        self._counter = 0

    def reset(self) -> None:
        """Drop the cycles accumulated so far."""
        self._counter = 0

    def update(self, cycles: int) -> int:
        """Add ``cycles`` and return the number of whole periods elapsed."""
        ticks, self._counter = divmod(self._counter + cycles, self.period)
        return ticks


class Timers(Memory):
    """DIV, TIMA, TMA and TAC, clocked at 4194304 Hz.

    DIV increments every 256 cycles. When enabled by bit 2 of TAC, TIMA
    increments at the rate selected by TAC bits 1-0; on overflow it is
    reloaded from TMA and a timer interrupt is requested.
    """

    def __init__(self) -> None:
        self.divider = 0
        self.counter = 0
        self.modulo = 0
        self.control = 0
        self._divider_clock = TimerClock(DIVIDER_PERIOD)
        self._modulo_clock = TimerClock(_TIMER_PERIODS[0x00])

    def cycle(self, ticks: int, irq_handler: IrqHandler) -> None:
        """Advance the timers by ``ticks`` clock cycles."""
        self.divider = (self.divider + self._divider_clock.update(ticks)) & 0xFF

        if self.control & 0x04:
            for _ in range(self._modulo_clock.update(ticks)):
                self.counter = (self.counter + 1) & 0xFF
                if self.counter == 0x00:
                    self.counter = self.modulo
                    irq_handler.request_interrupt(Interrupt.TIMER)

    def read_byte(self, address: int) -> int:
        if address == DIV:
            return self.divider
        if address == TIMA:
            return self.counter
        if address == TMA:
            return self.modulo
        if address == TAC:
            return self.control
        raise ValueError(f"timers are not mapped at {address:04X}")

    def write_byte(self, address: int, byte: int) -> None:
        byte &= 0xFF
        if address == DIV:
            self.divider = 0
            self._divider_clock.reset()
        elif address == TIMA:
            self.counter = byte
        elif address == TMA:
            self.modulo = byte
        elif address == TAC:
            if self.control & 0x03 != byte & 0x03:
                self._modulo_clock.reset()
                self._modulo_clock.period = _TIMER_PERIODS[byte & 0x03]
                self.counter = self.modulo
            self.control = byte
        else:
            raise ValueError(f"timers are not mapped at {address:04X}")