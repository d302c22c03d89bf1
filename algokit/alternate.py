"""Two threads taking turns to produce odd and even numbers."""

from __future__ import annotations

import threading


def odd_even_sequence(limit: int = 5) -> list[int]:
    """Return 1..limit, odd numbers made by one thread and even by another."""
    odd_turn = threading.Semaphore(1)
    even_turn = threading.Semaphore(0)
    produced: list[int] = []

    def run(start: int, mine: threading.Semaphore, other: threading.Semaphore) -> None:
        for number in range(start, limit + 1, 2):
            mine.acquire()
            produced.append(number)
            other.release()

    workers = [
        threading.Thread(target=run, args=(1, odd_turn, even_turn)),
        threading.Thread(target=run, args=(2, even_turn, odd_turn)),
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return produced