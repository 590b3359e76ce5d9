"""String problems: word reversal, bracket balance, anagrams, ternary strings."""

from __future__ import annotations

from collections import Counter

_CLOSING_TO_OPENING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING_TO_OPENING.values())


def reverse_words(text: str) -> str:
    """Return ``text`` with its space-separated words in reverse order.

    Words are separated by single spaces, so runs of spaces keep their
    width and move along with the words around them.
    """
    return " ".join(reversed(text.split(" ")))


def is_balanced(text: str) -> bool:
    """Report whether every bracket in ``text`` is closed by its own kind in order.

    Round, square and curly brackets are checked; other characters are ignored.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif char in _CLOSING_TO_OPENING:
            if not stack or stack.pop() != _CLOSING_TO_OPENING[char]:
                return False
    return not stack


def is_anagram(first: str, second: str) -> bool:
    """Report whether the two strings hold the same characters equally often."""
    return Counter(first) == Counter(second)


def minimal_ternary(s: str) -> str:
    """Return the smallest string reachable by swapping adjacent "01" or "12" pairs.

    ``s`` may hold only the characters 0, 1 and 2; a ValueError is raised
    otherwise. Ones can move anywhere, while zeros and twos keep their
    relative order, so all ones gather just before the first two.
    """
    invalid = set(s) - {"0", "1", "2"}
    if invalid:
        raise ValueError(f"unexpected characters: {''.join(sorted(invalid))}")
    ones = s.count("1")
    rest = s.replace("1", "")
    first_two = rest.find("2")
    if first_two == -1:
        return rest + "1" * ones
    return rest[:first_two] + "1" * ones + rest[first_two:]