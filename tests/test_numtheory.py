import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.numtheory import (
    binary_to_decimal,
    checksum,
    decimal_to_binary,
    fibonacci,
    is_perfect,
    ones_complement_sum,
    prime_factors,
)


def _is_prime(n):
    return n >= 2 and all(n % d for d in range(2, int(n**0.5) + 1))


@given(st.integers(1, 10**6))
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    product = 1
    for factor in factors:
        product *= factor
    assert product == n
    assert factors == sorted(factors)
    assert all(_is_prime(f) for f in factors)


def test_prime_factors_of_one_and_prime():
    assert prime_factors(1) == []
    assert prime_factors(97) == [97]


@pytest.mark.parametrize("n", [0, -5])
def test_prime_factors_rejects_non_positive(n):
    with pytest.raises(ValueError):
        prime_factors(n)


@given(st.integers(1, 10**9))
def test_binary_round_trip(n):
    digits = decimal_to_binary(n)
    assert int(digits, 2) == n
    assert binary_to_decimal(int(digits)) == n


def test_source_examples():
    assert decimal_to_binary(244) == format(244, "b")
    assert binary_to_decimal(10101001) == int("10101001", 2)


def test_decimal_to_binary_non_positive_is_empty():
    assert decimal_to_binary(0) == ""
    assert decimal_to_binary(-3) == ""


def test_binary_to_decimal_negative_mirrors_positive():
    assert binary_to_decimal(-101) == -binary_to_decimal(101)


def test_fibonacci_base_cases():
    assert [fibonacci(0), fibonacci(1), fibonacci(2)] == [0, 1, 1]


def test_fibonacci_recurrence():
    for n in range(200):
        assert fibonacci(n + 2) == fibonacci(n + 1) + fibonacci(n)


def test_fibonacci_source_driver_value():
    assert fibonacci(9) == fibonacci(8) + fibonacci(7)


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("p", [2, 3, 5, 7])
def test_euclid_numbers_are_perfect(p):
    assert is_perfect(2 ** (p - 1) * (2**p - 1))


@pytest.mark.parametrize("n", [2, 3, 13, 97, -6])
def test_primes_and_negatives_are_not_perfect(n):
    assert not is_perfect(n)


def test_zero_is_perfect():
    assert is_perfect(0)


words_strategy = st.integers(1, 10).flatmap(
    lambda width: st.lists(
        st.lists(st.integers(0, 1), min_size=width, max_size=width), min_size=1, max_size=6
    )
)


def _value(bits):
    return int("".join(map(str, bits)), 2)


@given(words_strategy)
def test_checksum_makes_all_ones(words):
    width = len(words[0])
    code = checksum(words)
    assert len(code) == width
    assert ones_complement_sum(words + [code]) == [1] * width


@given(words_strategy)
def test_checksum_is_complement_of_sum(words):
    total = ones_complement_sum(words)
    assert [a + b for a, b in zip(total, checksum(words))] == [1] * len(total)


@given(words_strategy)
def test_sum_is_congruent_modulo_mask(words):
    mask = (1 << len(words[0])) - 1
    total = _value(ones_complement_sum(words))
    assert total % mask == sum(_value(w) for w in words) % mask


@given(st.lists(st.integers(0, 1), min_size=1, max_size=8))
def test_single_word_sum_is_itself(word):
    assert ones_complement_sum([word]) == word


@pytest.mark.parametrize(
    "words",
    [[], [[]], [[1, 0], [1]], [[0, 2]]],
)
def test_checksum_rejects_bad_words(words):
    with pytest.raises(ValueError):
        checksum(words)