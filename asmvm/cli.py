"""Command line entry point: load, assemble and run a program."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from .config import MAX_AMOUNT_INSTRUCTIONS
from .control import HltInstruction
from .engine import Engine
from .instruction import Instruction
from .parser import fill_empty, parse_lines
from .preprocessor import Preprocessor

DEFAULT_SOURCE = "ressources/source.asm"
SHOWN_REGISTERS = 4


def read_source(path: str) -> list[str]:
    """Return the lines of a text file without their line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def execute_instructions(
    instructions: Sequence[Instruction], engine: Engine, out: TextIO | None = None
) -> None:
    """Run from the current program counter until HLT, tracing each step.

    ``instructions`` must cover every address the program counter can reach.
    Afterwards the first registers are written to ``out``.
    """
    out = sys.stdout if out is None else out
    instruction = instructions[engine.program_counter]
    while not isinstance(instruction, HltInstruction):
        print(instruction, file=out)
        instruction.execute(engine)
        engine.increment_program_counter()
        instruction = instructions[engine.program_counter]
    for index in range(SHOWN_REGISTERS):
        print(engine.registers[index], file=out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="asmvm", description="Assemble and run a program.")
    parser.add_argument("source", nargs="?", default=DEFAULT_SOURCE, help="assembly file")
    args = parser.parse_args(argv)

    engine = Engine()
    try:
        lines = read_source(args.source)
    except OSError:
        print("Cannot open file!", file=sys.stderr)
        return 1

    try:
        program = Preprocessor(lines).preprocess()
        instructions = parse_lines(program)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 2

    execute_instructions(fill_empty(instructions, MAX_AMOUNT_INSTRUCTIONS), engine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())