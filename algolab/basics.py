"""Small list and string utilities."""

from __future__ import annotations

import string
from typing import Iterable

_SWAP_ASCII = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_lowercase + string.ascii_uppercase,
)


def sort_ascending(numbers: Iterable[int]) -> list[int]:
    """Return the numbers in ascending order."""
    return sorted(numbers)


def swap_case(text: str) -> str:
    """Swap upper and lower case of ASCII letters, leaving everything else."""
    return text.translate(_SWAP_ASCII)