from asmvm.memory_cell import MemoryCell, NullMemoryCell, rol, ror

ALT = 30
DEFAULT_VALUE = 0
NULL_VALUE = 0


def test_constructor():
    assert MemoryCell() == DEFAULT_VALUE
    assert MemoryCell(ALT) == ALT


def test_assign():
    cell = MemoryCell()
    cell.assign(ALT)
    assert cell == ALT


def test_increments():
    cell = MemoryCell()
    cell.increment()
    assert cell == DEFAULT_VALUE + 1
    cell.increment()
    assert cell == DEFAULT_VALUE + 2


def test_decrements():
    cell = MemoryCell(ALT)
    cell.decrement()
    assert cell == ALT - 1
    cell.decrement()
    assert cell == ALT - 2


def test_self_addition():
    cell_int = MemoryCell()
    cell_int += ALT
    assert cell_int == DEFAULT_VALUE + ALT

    cell_other = MemoryCell()
    cell_other += MemoryCell(ALT)
    assert cell_other == DEFAULT_VALUE + ALT


def test_self_subtraction():
    cell_int = MemoryCell(ALT)
    cell_int -= ALT
    assert cell_int == ALT - ALT

    cell_other = MemoryCell(ALT)
    cell_other -= MemoryCell(ALT)
    assert cell_other == ALT - ALT


def test_other_addition():
    cell_int = MemoryCell()
    cell_int = cell_int + ALT
    assert cell_int == DEFAULT_VALUE + ALT

    cell_other = MemoryCell()
    cell_other = cell_other + MemoryCell(ALT)
    assert cell_other == DEFAULT_VALUE + ALT


def test_other_subtraction():
    cell_int = MemoryCell(ALT)
    cell_int = cell_int - ALT
    assert cell_int == ALT - ALT

    cell_other = MemoryCell(ALT)
    cell_other = cell_other - MemoryCell(ALT)
    assert cell_other == ALT - ALT


def test_addition_wraps():
    assert MemoryCell(255) + 1 == 0
    assert MemoryCell(0) - 1 == 255


def test_stream_output():
    assert str(MemoryCell()) == str(DEFAULT_VALUE)
    assert str(MemoryCell(ALT)) == str(ALT)


def test_is_null():
    assert MemoryCell().is_null() is False


def test_equalities():
    cell = MemoryCell(ALT)
    assert cell == MemoryCell(ALT)
    assert cell == ALT


def test_unary_subtraction():
    assert -MemoryCell(ALT) == -ALT


def test_other_and():
    cell_int = MemoryCell()
    cell_int = cell_int & ALT
    assert cell_int == DEFAULT_VALUE & ALT

    cell_other = MemoryCell()
    cell_other = cell_other & MemoryCell(ALT)
    assert cell_other == DEFAULT_VALUE & ALT


def test_other_or():
    cell_int = MemoryCell()
    cell_int = cell_int | ALT
    assert cell_int == DEFAULT_VALUE | ALT

    cell_other = MemoryCell()
    cell_other = cell_other | MemoryCell(ALT)
    assert cell_other == DEFAULT_VALUE | ALT


def test_other_xor():
    cell_int = MemoryCell()
    cell_int = cell_int ^ ALT
    assert cell_int == DEFAULT_VALUE ^ ALT

    cell_other = MemoryCell()
    cell_other = cell_other ^ MemoryCell(ALT)
    assert cell_other == DEFAULT_VALUE ^ ALT


def test_other_rsh():
    assert (MemoryCell() >> 1) == DEFAULT_VALUE >> 1
    assert (MemoryCell(ALT) >> 1) == ALT >> 1


def test_other_rol():
    assert rol(MemoryCell(), 1) == rol(DEFAULT_VALUE, 1)
    assert rol(MemoryCell(ALT), 1) == rol(ALT, 1)


def test_other_ror():
    assert ror(MemoryCell(), 1) == ror(DEFAULT_VALUE, 1)
    assert ror(MemoryCell(ALT), 1) == ror(ALT, 1)


def test_rotations_carry_around():
    assert rol(0x80, 1) == 0x01
    assert ror(0x01, 1) == 0x80


def test_rotations_are_inverse():
    for value in range(256):
        assert ror(rol(value, 3), 3) == value


def test_unary_not():
    assert MemoryCell(ALT).logical_not() == int(not ALT)
    assert MemoryCell(0).logical_not() == int(not 0)


def test_null_constructor():
    assert NullMemoryCell() == NULL_VALUE
    assert NullMemoryCell(MemoryCell(ALT)) == NULL_VALUE


def test_null_assign():
    cell_uint = NullMemoryCell()
    cell_uint.assign(ALT)
    assert cell_uint == NULL_VALUE

    cell_memory = NullMemoryCell()
    cell_memory.assign(MemoryCell(ALT))
    assert cell_memory == NULL_VALUE


def test_null_increments():
    cell = NullMemoryCell()
    cell.increment()
    assert cell == NULL_VALUE
    cell.increment()
    assert cell == NULL_VALUE


def test_null_decrements():
    cell = NullMemoryCell()
    cell.decrement()
    assert cell == NULL_VALUE
    cell.decrement()
    assert cell == NULL_VALUE


def test_null_self_addition():
    cell_int = NullMemoryCell()
    cell_int += ALT
    assert cell_int == NULL_VALUE

    cell_other = NullMemoryCell()
    cell_other += MemoryCell(ALT)
    assert cell_other == NULL_VALUE


def test_null_self_subtraction():
    cell_int = NullMemoryCell()
    cell_int -= ALT
    assert cell_int == NULL_VALUE

    cell_other = NullMemoryCell()
    cell_other -= MemoryCell(ALT)
    assert cell_other == NULL_VALUE


def test_null_other_addition():
    cell_int = NullMemoryCell()
    cell_int.assign(cell_int + ALT)
    assert cell_int == NULL_VALUE

    cell_other = NullMemoryCell()
    cell_other.assign(cell_other + MemoryCell(ALT))
    assert cell_other == NULL_VALUE


def test_null_other_subtraction():
    cell_int = NullMemoryCell()
    cell_int.assign(cell_int - ALT)
    assert cell_int == NULL_VALUE

    cell_other = NullMemoryCell()
    cell_other.assign(cell_other - MemoryCell(ALT))
    assert cell_other == NULL_VALUE


def test_null_subtraction_negates_cell():
    assert NullMemoryCell() - MemoryCell(ALT) == -ALT


def test_null_stream_output():
    assert str(NullMemoryCell()) == str(NULL_VALUE)


def test_null_is_null():
    assert NullMemoryCell().is_null() is True


def test_operation_with_cell_null():
    cell = NullMemoryCell() + MemoryCell(ALT)
    assert cell == ALT
    assert cell.is_null() is False