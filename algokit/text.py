"""Text utilities: line justification, k-distinct windows and word splitting."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def full_justify(words: Iterable[str], max_width: int) -> list[str]:
    """Lay ``words`` out in lines of ``max_width`` characters.

    Full lines spread their padding over the gaps from the left; a line with
    one word is padded on the right; the last line is right-aligned.
    """
    lines: list[str] = []
    current: list[str] = []
    letters = 0
    for word in words:
        if len(word) + len(current) + letters > max_width:
            if not current:
                raise ValueError(f"word {word!r} is wider than {max_width}")
            slots = max(1, len(current) - 1)
            gap, extra = divmod(max(0, max_width - letters), slots)
            padded = [
                word_ + " " * (gap + (i < extra))
                for i, word_ in enumerate(current[:slots])
            ]
            lines.append("".join(padded + current[slots:]))
            current = []
            letters = 0
        current.append(word)
        letters += len(word)
    lines.append(" ".join(current).rjust(max_width))
    return lines


def longest_k_string(s: str, k: int) -> int:
    """Length of the longest substring with at most ``k`` distinct characters."""
    counts: Counter[str] = Counter()
    start = 0
    for ch in s:
        counts[ch] += 1
        if len(counts) > k:
            left = s[start]
            counts[left] -= 1
            if not counts[left]:
                del counts[left]
            start += 1
    return len(s) - start


def split_words(s: str) -> list[str]:
    """Drop commas, semicolons and full stops, then split on whitespace."""
    return s.translate(str.maketrans("", "", ",;.")).split()