"""The joypad input register (P1)."""

from __future__ import annotations

from enum import IntEnum

from gbcore.interrupt import Interrupt

_SELECT_BUTTONS_BIT = 0b0010_0000
_SELECT_DIRECTION_BIT = 0b0001_0000
_IDLE = 0b0011_1111


class Button(IntEnum):
    A = 0
    B = 1
    SELECT = 2
    START = 3
    RIGHT = 4
    LEFT = 5
    UP = 6
    DOWN = 7


_ACTION_BUTTONS = (Button.A, Button.B, Button.SELECT, Button.START)
_DIRECTION_BUTTONS = (Button.RIGHT, Button.LEFT, Button.UP, Button.DOWN)


class JoyPad:
    """Button state plus the selection bits; a zero bit means pressed or selected."""

    def __init__(self, interrupt: Interrupt | None = None) -> None:
        self._buttons = [False] * len(Button)
        self._interrupt = interrupt
        self.select_buttons = True
        self.select_direction = True

    @staticmethod
    def _check(addr: int) -> None:
        if addr != 0:
            raise IndexError(f"invalid joypad address {addr:#06x}")

    def read(self, addr: int) -> int:
        self._check(addr)
        value = _IDLE
        if self.select_buttons:
            value &= ~_SELECT_BUTTONS_BIT
        if self.select_direction:
            value &= ~_SELECT_DIRECTION_BIT

        if self.select_buttons == self.select_direction:
            return value

        group = _ACTION_BUTTONS if self.select_buttons else _DIRECTION_BUTTONS
        for bit, button in enumerate(group):
            if self._buttons[button]:
                value &= ~(1 << bit)
        return value

    def write(self, addr: int, value: int) -> None:
        self._check(addr)
        self.select_buttons = not value & _SELECT_BUTTONS_BIT
        self.select_direction = not value & _SELECT_DIRECTION_BIT

    def set_button(self, button: Button, pressed: bool) -> None:
        """Change a button's state, raising the joypad interrupt on change."""
        if self._buttons[button] == pressed:
            return
        self._buttons[button] = pressed
        if self._interrupt is not None:
            self._interrupt.joypad = True

    def get_button(self, button: Button) -> bool:
        return self._buttons[button]

    def reset_buttons(self) -> None:
        """Release every button without raising an interrupt."""
        self._buttons = [False] * len(Button)