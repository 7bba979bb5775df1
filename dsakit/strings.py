"""Algorithms over strings: palindromes, brackets and stack reductions."""

from __future__ import annotations

from collections import Counter


def _is_palindrome_text(text: str) -> bool:
    return text == text[::-1]


def longest_palindromic_substring(s: str) -> str:
    """Return the longest palindromic substring of ``s``.

    Among several of the greatest length, the one starting earliest wins.
    An empty string gives an empty string.
    """
    for length in range(len(s), 0, -1):
        for start in range(len(s) - length + 1):
            candidate = s[start : start + length]
            if _is_palindrome_text(candidate):
                return candidate
    return ""


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parentheses substring.

    Any character other than ``(`` is treated as a closing parenthesis.
    """
    stack = [-1]
    best = 0
    for index, ch in enumerate(s):
        if ch == "(":
            stack.append(index)
            continue
        stack.pop()
        if stack:
            best = max(best, index - stack[-1])
        else:
            stack.append(index)
    return best


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways.

    Only ASCII letters and digits count, and case is ignored.
    """
    kept = [ch.lower() for ch in s if _is_ascii_alnum(ch)]
    return kept == kept[::-1]


def decode_string(s: str) -> str:
    """Expand encodings of the form ``k[text]``, which may be nested."""
    frames: list[tuple[str, int]] = []
    current = ""
    count = 0
    for ch in s:
        if ch.isascii() and ch.isdigit():
            count = count * 10 + int(ch)
        elif ch == "[":
            frames.append((current, count))
            current = ""
            count = 0
        elif ch == "]":
            if not frames:
                raise ValueError("unmatched ']' in encoded string")
            prefix, repeat = frames.pop()
            current = prefix + current * repeat
        else:
            current += ch
    return current


def longest_palindrome_length(s: str) -> int:
    """Return the length of the longest palindrome built from the letters of ``s``."""
    odd = sum(1 for n in Counter(s).values() if n % 2 == 1)
    if odd > 1:
        return len(s) - odd + 1
    return len(s)


def is_valid_abc(s: str) -> bool:
    """Tell whether ``s`` can be built by inserting ``abc`` into an empty string."""
    while s:
        found = s.find("abc")
        if found == -1:
            return False
        s = s[:found] + s[found + 3 :]
    return True


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def make_good(s: str) -> str:
    """Repeatedly remove adjacent pairs of one letter in opposite cases."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] != ch and stack[-1].lower() == ch.lower():
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)