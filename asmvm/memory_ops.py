"""Instructions that move data between registers and memory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import ValueType
from .instruction import Instruction

if TYPE_CHECKING:
    from .engine import Engine


class LodInstruction(Instruction):
    """LOD r [a] (offset) or LOD r addr: load a memory cell into register r."""

    name = "LOD"
    amount_operands = 3

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers, memory = engine.registers, engine.memory
        if self.is_regs_and_offset():
            offset = self.operands[2].value if len(self.operands) == self.amount_operands else 0
            address = registers[self.operands[1].value].value
            registers[self.operands[0].value] = memory[address + offset]
        if self.is_reg_and_immediate():
            registers[self.operands[0].value] = memory[self.operands[1].value]

    def is_correct(self) -> bool:
        if len(self.operands) not in (self.amount_operands, self.amount_operands - 1):
            return False
        return self.is_regs_and_offset() or self.is_reg_and_immediate()

    def is_regs_and_offset(self) -> bool:
        """A register, a bracketed register and an optional immediate offset."""
        operands = self.operands
        if len(operands) < 2:
            return False
        offset_ok = len(operands) != 3 or operands[2].value_type is ValueType.IMMEDIATE_VALUE
        return (
            operands[0].value_type is ValueType.REGISTER
            and operands[1].value_type is ValueType.REGISTER_VALUE
            and offset_ok
        )

    def is_reg_and_immediate(self) -> bool:
        """A register and an immediate address."""
        operands = self.operands
        if len(operands) == self.amount_operands or len(operands) < 2:
            return False
        return (
            operands[0].value_type is ValueType.REGISTER
            and operands[1].value_type is ValueType.IMMEDIATE_VALUE
        )


class StrInstruction(Instruction):
    """STR [a] [b] (offset) or STR addr [b]: store a register into memory."""

    name = "STR"
    amount_operands = 3

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers, memory = engine.registers, engine.memory
        if self.is_regs_and_offset():
            offset = self.operands[2].value if len(self.operands) == self.amount_operands else 0
            address = registers[self.operands[0].value].value
            memory[address + offset] = registers[self.operands[1].value].value
        if self.is_reg_and_immediate():
            memory[self.operands[0].value] = registers[self.operands[1].value].value

    def is_correct(self) -> bool:
        if len(self.operands) not in (self.amount_operands, self.amount_operands - 1):
            return False
        return self.is_regs_and_offset() or self.is_reg_and_immediate()

    def is_regs_and_offset(self) -> bool:
        """Two bracketed registers and an optional immediate offset."""
        operands = self.operands
        if len(operands) < 2:
            return False
        offset_ok = len(operands) != 3 or operands[2].value_type is ValueType.IMMEDIATE_VALUE
        return (
            operands[0].value_type is ValueType.REGISTER_VALUE
            and operands[1].value_type is ValueType.REGISTER_VALUE
            and offset_ok
        )

    def is_reg_and_immediate(self) -> bool:
        """An immediate address and a bracketed register."""
        operands = self.operands
        if len(operands) == self.amount_operands or len(operands) < 2:
            return False
        return (
            operands[0].value_type is ValueType.IMMEDIATE_VALUE
            and operands[1].value_type is ValueType.REGISTER_VALUE
        )