"""Reference (pure Python) password metrics.

* **repetition count** – occurrences of the most repeated character,
  case-sensitive (``"Elephant"`` → 1, ``"passwords"`` → 3).
* **sequence length** – longest ascending/descending run of letters or
  digits, case-insensitive (``"AbCdEf"`` → 6, ``"password123"`` → 3).
  Any non-alphanumeric character breaks a run.

Both functions return ``0`` for ``None`` / ``""`` and never raise on text.
"""
from __future__ import annotations
from collections import Counter
from typing import Optional

from .errors import PasswordTypeError

__all__ = [
    "max_repetition_count",
    "max_sequence_length",
    "is_permissible",
    "fold",
    "as_text",
]


def as_text(password) -> str:
    if password is None:
        return ""
    if not isinstance(password, str):
        raise PasswordTypeError(
            f"password must be str or None, not {type(password).__name__}"
        )
    return password


def fold(ch: str) -> int:
    """Case-normalised code point (upper-case, 1 char 유지)."""
    up = ch.upper()
    # 'ß' → 'SS' 처럼 길이가 바뀌면 원래 코드포인트 사용
    return ord(up) if len(up) == 1 else ord(ch)


def max_repetition_count(password: Optional[str]) -> int:
    password = as_text(password)
    if not password:
        return 0
    return max(Counter(password).values())


def max_sequence_length(password: Optional[str]) -> int:
    password = as_text(password)
    best = 0
    asc = desc = 0          # run length ending at current char
    prev: Optional[int] = None

    for ch in password:
        if not ch.isalnum():
            asc = desc = 0
            prev = None
            continue

        cur = fold(ch)
        if prev is not None and cur - prev == 1:
            asc, desc = asc + 1, 1
        elif prev is not None and cur - prev == -1:
            asc, desc = 1, desc + 1
        else:
            asc = desc = 1

        best = max(best, asc, desc)
        prev = cur

    return best


def is_permissible(
    password: Optional[str], max_repetition: int, max_sequence: int
) -> bool:
    return (
        max_repetition_count(password) <= max_repetition
        and max_sequence_length(password) <= max_sequence
    )
