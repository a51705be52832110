import pytest

@pytest.mark.parametrize(
    "body",
    ["0", "1", "101", "0000", "1" * 31, "0" * 31],
)
def test_valid_binary_bodies(logic, body):
    assert logic.is_valid_binary_body(body) is True

@pytest.mark.parametrize(
    "body",
    ["", "1" * 32, "2", "10a1", " 101", "101 ", "0b101", "１"],
)
def test_invalid_binary_bodies(logic, body):
    assert logic.is_valid_binary_body(body) is False

@pytest.mark.parametrize(
    "body",
    ["0", "9", "A", "F", "DEADBEEF", "0123ABCD", "00000000"],
)
def test_valid_hex_bodies(logic, body):
    assert logic.is_valid_hex_body(body) is True

@pytest.mark.parametrize(
    "body",
    ["", "123456789", "a", "dead", "G", "0x1", "A-B", "٣", " F"],
)
def test_invalid_hex_bodies(logic, body):
    assert logic.is_valid_hex_body(body) is False

@pytest.mark.parametrize("value", [None, 101, b"101", ["1"]])
def test_validators_reject_non_strings(logic, value):
    assert logic.is_valid_binary_body(value) is False
    assert logic.is_valid_hex_body(value) is False

def test_length_limits_match_constants(logic):
    assert logic.is_valid_binary_body("1" * logic.MAX_BINARY_DIGITS)
    assert not logic.is_valid_binary_body("1" * (logic.MAX_BINARY_DIGITS + 1))
    assert logic.is_valid_hex_body("F" * logic.MAX_HEX_DIGITS)
    assert not logic.is_valid_hex_body("F" * (logic.MAX_HEX_DIGITS + 1))
