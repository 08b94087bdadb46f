"""Register arithmetic, logic, shift and load-immediate instructions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import ValueType
from .instruction import Instruction
from .memory_cell import rol, ror
from .registers import Registers
from .token import Token

if TYPE_CHECKING:
    from .engine import Engine


def _register_and_immediate(operands: tuple[Token, ...]) -> bool:
    """A register or bracketed register, then an immediate value."""
    if len(operands) != 2:
        return False
    first, second = operands
    return second.value_type is ValueType.IMMEDIATE_VALUE and first.value_type in (
        ValueType.REGISTER,
        ValueType.REGISTER_VALUE,
    )


def _addressed_register(registers: Registers, token: Token) -> int:
    """The register a token names, directly or through another register."""
    if token.value_type is ValueType.REGISTER:
        return token.value
    return registers[token.value].value


class AddInstruction(Instruction):
    """ADD a b r: r = a + b, then compare a with b."""

    name = "ADD"
    amount_operands = 3

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        first, second, result = (operand.value for operand in self.operands)
        registers[result] = registers[first] + registers[second]
        engine.verify_flags(registers[first].value, registers[second].value)

    def is_correct(self) -> bool:
        return self._all_of_type(ValueType.REGISTER)


class SubInstruction(Instruction):
    """SUB a b r: r = a - b, then compare a with b."""

    name = "SUB"
    amount_operands = 3

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        first, second, result = (operand.value for operand in self.operands)
        registers[result] = registers[first] - registers[second]
        engine.verify_flags(registers[first].value, registers[second].value)

    def is_correct(self) -> bool:
        return self._all_of_type(ValueType.REGISTER)


class AndInstruction(Instruction):
    """AND a b r: r = a & b, then compare a with b."""

    name = "AND"
    amount_operands = 3

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        first, second, result = (operand.value for operand in self.operands)
        registers[result] = registers[first] & registers[second]
        engine.verify_flags(registers[first].value, registers[second].value)

    def is_correct(self) -> bool:
        return self._all_of_type(ValueType.REGISTER)


class NorInstruction(Instruction):
    """NOR a b r: r = logical not of (a | b), then compare a with b."""

    name = "NOR"
    amount_operands = 3

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        first, second, result = (operand.value for operand in self.operands)
        combined = registers[first] | registers[second]
        registers[result] = combined.logical_not()
        engine.verify_flags(registers[first].value, registers[second].value)

    def is_correct(self) -> bool:
        return self._all_of_type(ValueType.REGISTER)


class XorInstruction(Instruction):
    """XOR a b r: r = a ^ b, then compare a with b."""

    name = "XOR"
    amount_operands = 3

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        first, second, result = (operand.value for operand in self.operands)
        registers[result] = registers[first] ^ registers[second]
        engine.verify_flags(registers[first].value, registers[second].value)

    def is_correct(self) -> bool:
        return self._all_of_type(ValueType.REGISTER)


class AdiInstruction(Instruction):
    """ADI r imm: compare r with imm, then add imm to r."""

    name = "ADI"
    amount_operands = 2

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        target = _addressed_register(registers, self.operands[0])
        immediate = self.operands[1].value
        if target >= len(registers):
            return
        engine.verify_flags(registers[target].value, immediate)
        registers[target] = registers[target] + immediate

    def is_correct(self) -> bool:
        return _register_and_immediate(self.operands)


class LdiInstruction(Instruction):
    """LDI r imm: load an immediate value into a register."""

    name = "LDI"
    amount_operands = 2

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        target = _addressed_register(registers, self.operands[0])
        if target < len(registers):
            registers[target] = self.operands[1].value

    def is_correct(self) -> bool:
        return _register_and_immediate(self.operands)


class RshInstruction(Instruction):
    """RSH a r: r = a shifted right by one bit."""

    name = "RSH"
    amount_operands = 2

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        source, result = (operand.value for operand in self.operands)
        registers[result] = registers[source] >> 1

    def is_correct(self) -> bool:
        return self._all_of_type(ValueType.REGISTER)


class RorInstruction(Instruction):
    """ROR a r: r = a rotated right by one bit."""

    name = "ROR"
    amount_operands = 2

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        source, result = (operand.value for operand in self.operands)
        registers[result] = ror(registers[source], 1)

    def is_correct(self) -> bool:
        return self._all_of_type(ValueType.REGISTER)


class RolInstruction(Instruction):
    """ROL a r: r = a rotated left by one bit."""

    name = "ROL"
    amount_operands = 2

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        registers = engine.registers
        source, result = (operand.value for operand in self.operands)
        registers[result] = rol(registers[source], 1)

    def is_correct(self) -> bool:
        return self._all_of_type(ValueType.REGISTER)