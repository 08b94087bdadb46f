"""Base class shared by every machine instruction."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, ClassVar

from .config import ValueType
from .token import Token

if TYPE_CHECKING:
    from .engine import Engine


class InvalidInstructionError(ValueError):
    """Raised when an instruction is executed with operands it does not accept."""


class Instruction:
    """An instruction name together with its operand tokens.

    Subclasses set ``name`` and ``amount_operands``, override ``is_correct``
    and extend ``execute``; the base ``execute`` only validates.
    """

    name: ClassVar[str] = ""
    amount_operands: ClassVar[int] = 0

    def __init__(self, operands: Iterable[Token] = ()) -> None:
        self.operands: tuple[Token, ...] = tuple(operands)

    def execute(self, engine: Engine) -> None:
        """Raise ``InvalidInstructionError`` unless the operands are acceptable."""
        if not self.is_correct():
            raise InvalidInstructionError("Invalid instruction")

    def is_correct(self) -> bool:
        """Whether the operands fit this instruction; never for the bare base."""
        return False

    def _all_of_type(self, value_type: ValueType) -> bool:
        """Exactly ``amount_operands`` operands, all of ``value_type``."""
        return len(self.operands) == self.amount_operands and all(
            operand.value_type is value_type for operand in self.operands
        )

    def __str__(self) -> str:
        listed = "".join(f"{operand} " for operand in self.operands)
        return f"Instruction[name : {self.name}, Operands : {{ {listed}}}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.operands)!r})"