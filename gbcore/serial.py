"""Serial port registers."""

from __future__ import annotations

from collections.abc import Callable

SerialCallback = Callable[[int], None]

TRANSFER_START = 0x81


class Serial:
    """The SB (data) and SC (control) serial registers.

    Writing the start-transfer value to the control register hands the
    current data byte to the callback.
    """

    def __init__(self, callback: SerialCallback | None = None) -> None:
        self.data = 0x00
        self.control = 0x00
        self._callback = callback

    def write_control(self, control: int) -> None:
        """Set the control register, starting a transfer when requested."""
        self.control = control
        if control == TRANSFER_START and self._callback is not None:
            self._callback(self.data)