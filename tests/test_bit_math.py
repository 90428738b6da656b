import pytest

from univ3math.bit_math import least_significant_bit, most_significant_bit
from univ3math.constants import U160_MAX, U256_MAX


def test_most_significant_bit_throws_for_zero():
    with pytest.raises(ValueError, match="overflow"):
        most_significant_bit(0)


def test_most_significant_bit_powers_of_two():
    for i in range(256):
        assert most_significant_bit(1 << i) == i


def test_most_significant_bit_all_ones():
    for i in range(1, 256):
        assert most_significant_bit((1 << i) - 1) == i - 1


def test_most_significant_bit_max():
    assert most_significant_bit(U256_MAX) == 255
    assert most_significant_bit(U160_MAX) == 159


def test_most_significant_bit_doc_example():
    assert most_significant_bit(int("101010", 2)) == 5


def test_least_significant_bit_powers_of_two():
    for i in range(256):
        assert least_significant_bit(1 << i) == i


def test_least_significant_bit_all_ones():
    for i in range(1, 256):
        assert least_significant_bit((1 << i) - 1) == 0


def test_least_significant_bit_max():
    assert least_significant_bit(U256_MAX) == 0


def test_least_significant_bit_doc_example():
    assert least_significant_bit(int("101010", 2)) == 1
    assert least_significant_bit(1 << 42) == 42


def test_least_significant_bit_rejects_zero():
    with pytest.raises(ValueError):
        least_significant_bit(0)


def test_negative_input_rejected():
    with pytest.raises(ValueError):
        most_significant_bit(-4)