"""Dynamic-programming puzzles over sums, coins, strings and grid paths."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

TICKET_DURATIONS = (1, 7, 30)


def can_sum(target: int, nums: Iterable[int]) -> bool:
    """Tell whether ``target`` is a sum of values from ``nums``, each usable often."""
    if target < 0:
        return False
    steps = sorted({n for n in nums if n > 0})
    reachable = [False] * (target + 1)
    reachable[0] = True
    for total in range(target + 1):
        if not reachable[total]:
            continue
        for step in steps:
            if total + step <= target:
                reachable[total + step] = True
    return reachable[target]


def min_coins(coins: Sequence[int], amount: int) -> int | None:
    """Return the fewest coins summing to ``amount``, or ``None`` if impossible."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    best: list[int | None] = [0] + [None] * amount
    for value in range(1, amount + 1):
        options = [
            count
            for coin in coins
            if coin <= value and (count := best[value - coin]) is not None
        ]
        if options:
            best[value] = min(options) + 1
    return best[amount]


def lcs(a: str, b: str) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for ch in a:
        row = [0]
        for j, other in enumerate(b, 1):
            if ch == other:
                row.append(previous[j - 1] + 1)
            else:
                row.append(max(previous[j], row[j - 1]))
        previous = row
    return previous[-1]


def min_cost_stairs(costs: Sequence[int]) -> int:
    """Cheapest climb past the top, stepping one or two stairs at a time."""
    if len(costs) < 2:
        raise ValueError("min_cost_stairs() requires at least two steps")
    one, two = costs[0], costs[1]
    for cost in costs[2:]:
        one, two = two, cost + min(one, two)
    return min(one, two)


def can_construct(target: str, word_bank: Iterable[str]) -> bool:
    """Tell whether ``target`` is a concatenation of words from ``word_bank``."""
    words = frozenset(word_bank)

    @lru_cache(maxsize=None)
    def build(s: str) -> bool:
        if s in words:
            return True
        return any(s[:i] in words and build(s[i:]) for i in range(1, len(s)))

    return build(target)


def traveller_ways(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError(f"grid dimensions must be positive, got {m} x {n}")
    row = [1] * n
    for _ in range(m - 1):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two parts of equal sum."""
    if any(n < 0 for n in nums):
        raise ValueError("can_partition() requires non-negative numbers")
    total = sum(nums)
    if total % 2:
        return False
    half = total // 2
    reachable = [True] + [False] * half
    for n in nums:
        for j in range(half, n - 1, -1):
            if reachable[j - n]:
                reachable[j] = True
    return reachable[half]


def min_cost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest set of 1-, 7- and 30-day passes covering the ascending ``days``."""
    if len(costs) != len(TICKET_DURATIONS):
        raise ValueError(f"expected {len(TICKET_DURATIONS)} costs, got {len(costs)}")
    travel = list(days)
    count = len(travel)

    @lru_cache(maxsize=None)
    def cheapest(i: int) -> int:
        if i >= count:
            return 0
        best: int | None = None
        j = i
        for duration, cost in zip(TICKET_DURATIONS, costs):
            while j < count and travel[j] < travel[i] + duration:
                j += 1
            option = cost + cheapest(j)
            if best is None or option < best:
                best = option
        return best

    return cheapest(0)


def count_construct(target: str, elements: Iterable[str]) -> int:
    """Count the ways ``target`` is a concatenation of ``elements``.

    Repeated elements count as separate choices.
    """
    parts = list(elements)
    if any(not part for part in parts):
        raise ValueError("elements must be non-empty strings")

    @lru_cache(maxsize=None)
    def ways(s: str) -> int:
        if not s:
            return 1
        return sum(ways(s[len(part):]) for part in parts if s.startswith(part))

    return ways(target)