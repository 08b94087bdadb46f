"""Turning preprocessed source lines into instruction objects."""

from __future__ import annotations

from collections.abc import Iterable

from .arithmetic import (
    AddInstruction,
    AdiInstruction,
    AndInstruction,
    LdiInstruction,
    NorInstruction,
    RolInstruction,
    RorInstruction,
    RshInstruction,
    SubInstruction,
    XorInstruction,
)
from .config import AVAILABLE_FLAGS, ValueType
from .control import (
    BrhInstruction,
    CalInstruction,
    HltInstruction,
    JmpInstruction,
    NopInstruction,
    RetInstruction,
)
from .instruction import Instruction
from .lexical import is_digits, is_flag, is_register, is_register_value
from .memory_ops import LodInstruction, StrInstruction
from .token import Token

INSTRUCTION_SET: dict[str, type[Instruction]] = {
    cls.name: cls
    for cls in (
        NopInstruction,
        AddInstruction,
        SubInstruction,
        HltInstruction,
        LdiInstruction,
        AdiInstruction,
        NorInstruction,
        XorInstruction,
        AndInstruction,
        RshInstruction,
        RorInstruction,
        RolInstruction,
        JmpInstruction,
        BrhInstruction,
        CalInstruction,
        RetInstruction,
        LodInstruction,
        StrInstruction,
    )
}


class ParseError(ValueError):
    """Raised when a source line cannot be turned into an instruction."""


def parse_line(line: str) -> Instruction:
    """Build the instruction a single line names, without checking its operands."""
    name, _, rest = line.partition(" ")
    try:
        factory = INSTRUCTION_SET[name]
    except KeyError:
        raise ParseError(f"Unrecognized instruction: {name}") from None
    return factory(extract_operands(rest))


def parse_lines(lines: Iterable[str]) -> list[Instruction]:
    """Parse every non-empty line; raise ``ParseError`` on the first bad one."""
    instructions: list[Instruction] = []
    for line in lines:
        if not line:
            continue
        instruction = parse_line(line)
        if not instruction.is_correct():
            raise ParseError(f"Error parsing instruction : {line}")
        instructions.append(instruction)
    return instructions


def fill_empty(instructions: Iterable[Instruction], to_have: int) -> list[Instruction]:
    """Return the instructions padded with NOPs up to ``to_have`` entries."""
    program = list(instructions)
    program.extend(NopInstruction() for _ in range(to_have - len(program)))
    return program


def extract_operands(text: str) -> list[Token]:
    """Split the operand part of a line on single spaces into tokens."""
    if not text:
        return []
    tokens = []
    for operand in text.split(" "):
        value_type = determine_operand_type(operand)
        tokens.append(Token(determine_operand_value(operand, value_type), value_type))
    return tokens


def determine_operand_type(operand: str) -> ValueType:
    if is_digits(operand):
        return ValueType.IMMEDIATE_VALUE
    if is_register(operand):
        return ValueType.REGISTER
    if is_register_value(operand):
        return ValueType.REGISTER_VALUE
    if is_flag(operand):
        return ValueType.FLAG
    raise ParseError(f"Unrecognized type: {operand}")


def _number(digits: str, operand: str) -> int:
    try:
        return int(digits) & 0xFF
    except ValueError:
        raise ParseError(f"Invalid operand value: {operand!r}") from None


def determine_operand_value(operand: str, value_type: ValueType) -> int:
    """The 8-bit value an operand of the given kind encodes."""
    if value_type is ValueType.IMMEDIATE_VALUE:
        return _number(operand, operand)
    if value_type is ValueType.REGISTER:
        return _number(operand[1:], operand)
    if value_type is ValueType.REGISTER_VALUE:
        return _number(operand[2:-1], operand)
    if value_type is ValueType.FLAG:
        if operand not in AVAILABLE_FLAGS:
            raise ParseError(f"Unrecognized flag: {operand}")
        return AVAILABLE_FLAGS.index(operand)
    raise ParseError("Unknown type")