# asmvm

`asmvm` runs programs written in a compact assembly language on a small
8-bit virtual machine. The machine has 16 registers, 255 bytes of data
memory, four comparison flags, a small call stack and room for 1024
instructions.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running a program

```
asmvm program.asm
```

With no argument the command reads `ressources/source.asm`. The same entry
point is available as `python -m asmvm.cli`.

The source is preprocessed, parsed and padded with `NOP` up to 1024
instructions, then executed from address 0 until a `HLT` instruction is
reached. Each executed instruction is printed before it runs. When the
program stops, the values of registers `r0` to `r3` are printed, one per
line.

Exit status:

| Status | Meaning                                                  |
|--------|----------------------------------------------------------|
| 0      | the program ran to a `HLT`                               |
| 1      | the source file could not be opened ("Cannot open file!") |
| 2      | a preprocessing or parsing error; the message goes to stderr |

The program counter wraps around at 1024, so a program that never reaches
`HLT` runs forever. Errors raised while the program runs (for example a
memory address out of range or a `RET` with an empty stack) are not caught.

## The language

One instruction per line. Operands are separated by single spaces; leading
and trailing blanks and empty lines are ignored.

| Operand form      | Meaning                                                          |
|-------------------|------------------------------------------------------------------|
| `42`              | immediate value (kept to one byte)                               |
| `r3`              | register 3                                                       |
| `[r3]`            | the value held in `r3`, used as shown in the table below         |
| `=` `!=` `>=` `<` | a condition flag                                                 |

Register `r0` always reads as zero; writes to it are ignored.

### Instructions

| Name  | Operands                                  | Effect                                                           |
|-------|-------------------------------------------|------------------------------------------------------------------|
| `NOP` | none                                      | does nothing                                                     |
| `HLT` | none                                      | stops the program                                                |
| `ADD` | `rA rB rC`                                | `rC = rA + rB`, then sets the flags by comparing `rA` with `rB`  |
| `SUB` | `rA rB rC`                                | `rC = rA - rB`, then sets the flags                              |
| `AND` | `rA rB rC`                                | `rC = rA & rB`, then sets the flags                              |
| `XOR` | `rA rB rC`                                | `rC = rA ^ rB`, then sets the flags                              |
| `NOR` | `rA rB rC`                                | `rC` = 1 if `rA \| rB` is zero, else 0; then sets the flags      |
| `ADI` | `rA imm` or `[rA] imm`                    | compares the register with `imm`, then adds `imm` to it          |
| `LDI` | `rA imm` or `[rA] imm`                    | loads `imm` into the register                                    |
| `RSH` | `rA rB`                                   | `rB = rA >> 1`                                                   |
| `ROR` | `rA rB`                                   | `rB` = `rA` rotated right by one bit                             |
| `ROL` | `rA rB`                                   | `rB` = `rA` rotated left by one bit                              |
| `JMP` | `addr`                                    | continues at `addr`                                              |
| `BRH` | `flag addr`                               | continues at `addr` when `flag` is set                           |
| `CAL` | `addr`                                    | pushes the current address and continues at `addr`               |
| `RET` | none                                      | continues after the most recently pushed address                 |
| `LOD` | `rA [rB]`, `rA [rB] off`, `rA addr`       | loads memory at `rB` (+ `off`), or at `addr`, into `rA`          |
| `STR` | `[rA] [rB]`, `[rA] [rB] off`, `addr [rB]` | stores `rB` into memory at `rA` (+ `off`), or at `addr`          |

For `ADI` and `LDI`, `[rA]` means the register whose number is held in
`rA`. Arithmetic wraps around at 256. The flags, in order, are
`=`, `!=`, `>=` and `<`.

The call stack accepts 17 entries before `push_stack` raises
`OverflowError`, and return addresses are stored as a single byte.

### Labels and definitions

A line starting with `.` is a label; it names the address of the
instruction on that line, or on the next non-empty line. A line starting
with `define` must have the form

```
define NAME VALUE
```

and is removed from the program. Afterwards every occurrence of every label
and defined name is replaced, as plain text anywhere in a line, by its
value, names taken in sorted order. Choose names that cannot appear inside
other operands.

```
define LIMIT 5
LDI r1 0
LDI r2 LIMIT
.loop
ADI r1 1
SUB r1 r2 r0
BRH < .loop
HLT
```

## Using it from Python

```python
import sys

from asmvm.cli import execute_instructions
from asmvm.engine import Engine
from asmvm.parser import fill_empty, parse_lines
from asmvm.preprocessor import Preprocessor

lines = Preprocessor(["LDI r1 7", "ADD r1 r1 r2", "HLT"]).preprocess()
program = fill_empty(parse_lines(lines), 1024)
engine = Engine()
execute_instructions(program, engine, sys.stdout)
print(int(engine.registers[2]))  # 14
```

The modules:

- `asmvm.preprocessor` — `Preprocessor`, `extract_label`, `extract_definition`
- `asmvm.parser` — `parse_line`, `parse_lines`, `fill_empty`,
  `extract_operands`, `determine_operand_type`, `determine_operand_value`,
  `ParseError`, `INSTRUCTION_SET`
- `asmvm.engine` — `Engine` with `registers`, `memory`, `program_counter`,
  `flag_states`, `verify_flags`, `jump`, `push_stack`, `pop_stack`
- `asmvm.registers`, `asmvm.memory`, `asmvm.memory_cell` — `Registers`,
  `Memory`, `MemoryCell`, `NullMemoryCell`, `ror`, `rol`
- `asmvm.instruction`, `asmvm.arithmetic`, `asmvm.control`,
  `asmvm.memory_ops` — `Instruction`, `InvalidInstructionError` and one class
  per instruction (`AddInstruction`, `BrhInstruction`, `LodInstruction`, ...)
- `asmvm.token`, `asmvm.config`, `asmvm.lexical` — `Token`, `ValueType`,
  `FlagType`, the machine constants and the operand recognisers

## What it does not do

`asmvm` only runs a program and prints its trace and first four registers.
It has no interactive or step-by-step mode, does not dump memory or the
other registers, and does not write assembled programs out in any binary
form.