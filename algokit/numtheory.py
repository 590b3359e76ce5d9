"""Number theory and bit-level helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition.

    Raises ValueError when ``n`` is less than 1.
    """
    if n < 1:
        raise ValueError(f"cannot factor {n}")
    factors: list[int] = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 2
    if n > 2:
        factors.append(n)
    return factors


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as binary digits and return their value."""
    if n < 0:
        return -binary_to_decimal(-n)
    value = 0
    place = 1
    while n:
        n, digit = divmod(n, 10)
        value += digit * place
        place *= 2
    return value


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of ``n``; an empty string when ``n`` is not positive."""
    return format(n, "b") if n > 0 else ""


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n == 0:
        return 0
    if n <= 2:
        return 1
    if n & 1:
        k = (n + 1) // 2
        return _fib(k) ** 2 + _fib(k - 1) ** 2
    k = n // 2
    return (2 * _fib(k - 1) + _fib(k)) * _fib(k)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number using the doubling identities.

    Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    return _fib(n)


def is_perfect(n: int) -> bool:
    """Report whether ``n`` equals the sum of its divisors below it.

    Zero counts as perfect, since it has no such divisors.
    """
    return n == sum(d for d in range(1, n) if n % d == 0)


def _validated(words: Iterable[Sequence[int]]) -> tuple[int, list[int]]:
    rows = [list(word) for word in words]
    if not rows:
        raise ValueError("at least one word is needed")
    width = len(rows[0])
    if width == 0:
        raise ValueError("words must not be empty")
    values = []
    for row in rows:
        if len(row) != width:
            raise ValueError("every word must have the same number of bits")
        if any(bit not in (0, 1) for bit in row):
            raise ValueError(f"bits must be 0 or 1, got {row}")
        values.append(int("".join(map(str, row)), 2))
    return width, values


def ones_complement_sum(words: Iterable[Sequence[int]]) -> list[int]:
    """Add bit words with end-around carry and return the sum's bits.

    Each word is a sequence of 0/1 bits, most significant first; all words
    must be equally wide. Raises ValueError otherwise.
    """
    width, values = _validated(words)
    mask = (1 << width) - 1
    total = 0
    for value in values:
        total += value
        if total > mask:
            total = (total & mask) + 1
    return [int(bit) for bit in format(total, f"0{width}b")]


def checksum(words: Iterable[Sequence[int]]) -> list[int]:
    """Return the one's complement of the one's-complement sum of ``words``."""
    return [1 - bit for bit in ones_complement_sum(words)]