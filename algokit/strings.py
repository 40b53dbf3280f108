"""Algorithms over strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import takewhile

_VOWELS = frozenset("aeiou")


def reverse_words(s: str) -> str:
    """Reverse each space-separated word in place, keeping the spaces."""
    return " ".join(word[::-1] for word in s.split(" "))


def _typed(text: str) -> str:
    kept: list[str] = []
    for char in text:
        if char == "#":
            if kept:
                kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether two strings are equal once each '#' erases the character before it."""
    return _typed(s) == _typed(t)


def min_deletions(s: str) -> int:
    """Return the fewest deletions that leave every character with a distinct count."""
    frequencies = sorted(Counter(s).values(), reverse=True)
    deletions = 0
    allowed = frequencies[0] if frequencies else 0
    for frequency in frequencies[1:]:
        kept = min(frequency, max(0, allowed - 1))
        deletions += frequency - kept
        allowed = kept
    return deletions


def winner_of_game(colors: str) -> bool:
    """Tell whether Alice wins by having more removable 'A' pieces than Bob has 'B' pieces."""
    alice = bob = 0
    for before, piece, after in zip(colors, colors[1:], colors[2:]):
        if before == piece == after:
            if piece == "A":
                alice += 1
            else:
                bob += 1
    return alice > bob


def is_vowel_string(word: str) -> bool:
    """Tell whether the word starts and ends with a vowel."""
    return bool(word) and word[0] in _VOWELS and word[-1] in _VOWELS


def vowel_strings(words: Sequence[str], left: int, right: int) -> int:
    """Count vowel strings among words[left..right], both ends included."""
    if left <= right and (left < 0 or right >= len(words)):
        raise IndexError("range lies outside the word list")
    return sum(1 for word in words[left : right + 1] if is_vowel_string(word))


def maximum_odd_binary_number(s: str) -> str:
    """Rearrange the bits of s into the largest odd binary number."""
    if not s:
        return ""
    ones = s.count("1")
    if ones == 0:
        raise ValueError("an odd binary number needs at least one '1'")
    return "1" * (ones - 1) + "0" * (len(s) - ones) + "1"


def find_minimum_operations(s1: str, s2: str, s3: str) -> int:
    """Return how many trailing characters to delete to make three strings equal, or -1."""
    if s1[:1] != s2[:1] or s2[:1] != s3[:1]:
        return -1
    common = sum(1 for _ in takewhile(lambda chars: chars[0] == chars[1] == chars[2], zip(s1, s2, s3)))
    return len(s1) + len(s2) + len(s3) - 3 * common


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    prefix: list[str] = []
    for chars in zip(*strs):
        if any(char != chars[0] for char in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)