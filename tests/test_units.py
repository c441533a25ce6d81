import pytest

from yelay_agentkit.onchain.units import UINT256_MAX, parse_units, to_uint256


def test_parse_units_whole_amount():
    assert parse_units("1", 18) == 10**18


def test_parse_units_fractional_amounts():
    assert parse_units("0.1", 18) == 10**17
    assert parse_units("1.5", 6) == 1_500_000
    assert parse_units("0.000001", 6) == 1


def test_parse_units_keeps_large_values_exact():
    amount = "123456789012345678901234567890"
    assert parse_units(amount, 18) == int(amount) * 10**18


def test_parse_units_rejects_excess_precision():
    with pytest.raises(ValueError):
        parse_units("0.0000001", 6)


@pytest.mark.parametrize("amount", ["abc", "-1", "NaN", ""])
def test_parse_units_rejects_bad_amounts(amount):
    with pytest.raises(ValueError):
        parse_units(amount, 18)


def test_parse_units_rejects_bad_decimals():
    with pytest.raises(ValueError):
        parse_units("1", 78)


def test_to_uint256_bounds():
    assert to_uint256(str(UINT256_MAX)) == UINT256_MAX
    with pytest.raises(ValueError):
        to_uint256(str(UINT256_MAX + 1))
    with pytest.raises(ValueError):
        to_uint256("1.5")


def test_parse_units_rejects_excess_precision_on_long_amounts():
    with pytest.raises(ValueError):
        parse_units("1." + "0" * 108 + "1", 18)


def test_parse_units_accepts_trailing_zeros_beyond_decimals():
    assert parse_units("1." + "0" * 40, 18) == 10**18


def test_parse_units_rejects_overflow():
    with pytest.raises(ValueError):
        parse_units("1" + "0" * 60, 18)
