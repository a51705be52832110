import pytest

SAMPLES = [0, 1, 2, 3, 7, 8, 15, 16, 255, 256, 1023, 1024, 65535, 65536,
           123456789, 2**29 + 12345, 2**30 - 1, 2**30]

@pytest.mark.parametrize("decimal", SAMPLES)
def test_decimal_binary_decimal(logic, decimal):
    assert logic.binary_to_decimal(logic.decimal_to_binary(decimal)) == decimal

@pytest.mark.parametrize("decimal", SAMPLES + [2**31 - 1])
def test_minimal_binary_survives_decimal_trip(logic, decimal):
    binary = "0b" + format(decimal, "b")
    assert logic.decimal_to_binary(logic.binary_to_decimal(binary)) == binary

@pytest.mark.parametrize("decimal", SAMPLES + [2**31 - 1])
def test_all_forms_agree(logic, decimal):
    binary = logic.decimal_to_binary(decimal)
    hex_string = logic.binary_to_hex(binary)
    assert hex_string == logic.decimal_to_hex(decimal)
    assert logic.hex_to_decimal(hex_string) == decimal
    assert logic.hex_to_binary(hex_string) == binary
