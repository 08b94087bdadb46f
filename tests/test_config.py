import pytest

from asmvm.config import ValueType


@pytest.mark.parametrize(
    "value_type, text",
    [
        (ValueType.IMMEDIATE_VALUE, "IMMEDIATE_VALUE"),
        (ValueType.REGISTER, "REGISTER"),
        (ValueType.REGISTER_VALUE, "REGISTER_VALUE"),
        (ValueType.FLAG, "FLAG"),
    ],
)
def test_value_type_str(value_type, text):
    assert str(value_type) == text


def test_value_type_str_in_format():
    value_type = ValueType(ValueType.REGISTER.value)
    rendered = "{} : 1".format(str(value_type))
    assert rendered == "REGISTER : 1"


def test_value_type_str_matches_member_name():
    rendered = [str(ValueType(member.value)) for member in ValueType]
    assert rendered == ["IMMEDIATE_VALUE", "REGISTER", "REGISTER_VALUE", "FLAG"]