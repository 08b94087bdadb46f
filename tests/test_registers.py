import pytest

from asmvm.registers import DEFAULT_SIZE_REGISTERS, Registers

ALT = 30
NULL_VALUE = 0


def test_constructor():
    registers = Registers()
    assert len(registers) == DEFAULT_SIZE_REGISTERS
    assert registers[0].is_null() is True
    for index in range(1, 16):
        assert registers[index].is_null() is False


def test_cells_assignations():
    registers = Registers()
    registers[1] = ALT
    assert registers[1] == ALT
    registers[2] = ALT
    assert registers[2] == ALT


def test_operations_with_memory_cells():
    registers = Registers()
    registers[1] = ALT
    registers[2] = ALT

    registers[3] = registers[1] + registers[2]
    assert registers[3] == ALT + ALT

    registers[3] = registers[1] - registers[2]
    assert registers[3] == ALT - ALT


def test_operations_on_memory_cells_null():
    registers = Registers()
    registers[1] = ALT
    registers[2] = ALT

    registers[0] = registers[1] + registers[2]
    assert registers[3] == 0
    assert registers[0] == NULL_VALUE

    registers[0].increment()
    assert registers[0] == NULL_VALUE


def test_operations_with_memory_cells_null():
    registers = Registers()
    registers[1] = ALT

    registers[1] = registers[0] + registers[1]
    assert registers[1] == ALT

    registers[1] = registers[0] + registers[1]
    assert registers[1] == ALT

    registers[1] += registers[0]
    assert registers[1] == ALT

    registers[1] -= registers[0]
    assert registers[1] == ALT

    registers[2].increment()
    assert registers[2] == 1


def test_operation_self_assigns():
    registers = Registers()
    registers[1] = ALT
    registers[2] = ALT
    registers[1] += registers[2]
    assert registers[1] == ALT + ALT

    registers[1] = registers[1] - registers[2]
    assert registers[1] == ALT


def test_access_out_of_range():
    registers = Registers()
    with pytest.raises(IndexError):
        registers[-1]
    with pytest.raises(IndexError):
        registers[DEFAULT_SIZE_REGISTERS]
    assert len(registers) == DEFAULT_SIZE_REGISTERS
    assert registers[DEFAULT_SIZE_REGISTERS - 1] == 0


def test_index_by_cell():
    registers = Registers()
    registers[3] = ALT
    registers[1] = 3
    assert registers[registers[1]] == ALT