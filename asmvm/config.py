"""Machine-wide constants and operand kinds."""

from __future__ import annotations

from enum import Enum, IntEnum, auto

MAX_AMOUNT_INSTRUCTIONS = 1024
DEFAULT_SIZE_MEMORY = 255
MAX_STACK_MEMORY = 16
FIRST_LABEL_CHAR = "."
DEFINITION_KEY_WORD = "define"

AVAILABLE_FLAGS: tuple[str, ...] = ("=", "!=", ">=", "<")


class ValueType(Enum):
    """Kind of an instruction operand."""

    IMMEDIATE_VALUE = auto()
    REGISTER = auto()
    REGISTER_VALUE = auto()
    FLAG = auto()

    def __str__(self) -> str:
        return self.name


class FlagType(IntEnum):
    """Comparison flags, numbered in the order of ``AVAILABLE_FLAGS``."""

    EQUALS = 0
    NOT_EQUALS = 1
    GREATER_OR_EQUALS = 2
    LESS = 3