"""Discrete input events"""
from enum import Enum, auto
from typing import Optional


class Input(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    ROTATE_CW = auto()
    ROTATE_CCW = auto()


# letter bindings shared by every front-end; arrow keys are mapped per backend
LETTER_KEYS = {
    "h": Input.MOVE_LEFT,
    "l": Input.MOVE_RIGHT,
    "j": Input.SOFT_DROP,
    "a": Input.ROTATE_CCW,
    "s": Input.ROTATE_CW,
}


def from_letter(ch: str) -> Optional[Input]:
    return LETTER_KEYS.get(ch.lower())


class InputSource:
    """Non-blocking event source; poll_event returns None when nothing is pending."""
    def poll_event(self) -> Optional[Input]:
        raise NotImplementedError
