"""A dispatcher that spreads requests over a resizable pool of worker threads."""

from __future__ import annotations

import argparse
import logging
import os
import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

log = logging.getLogger(__name__)

RequestHandler = Callable[[Any], Any]

DEFAULT_TIMEOUT = 0.01
"""Seconds a handler may run when a request sets no timeout of its own."""


def _accept(data: Any) -> Any:
    """Default handler: accept any data and hand it back unchanged."""
    return data


DEFAULT_HANDLERS: dict[int, RequestHandler] = {1: _accept}

_CLOSED = object()


@dataclass
class Request:
    """A unit of work; ``type`` selects the worker's handler."""

    data: Any = None
    type: int = 1
    handler: RequestHandler | None = None
    timeout: float = 0.0
    retries: int = 0
    max_retries: int = 0


def _call_with_timeout(
    handler: RequestHandler, data: Any, timeout: float
) -> tuple[bool, BaseException | None]:
    """Run ``handler(data)`` in a thread; return (finished, error)."""
    outcome: dict[str, BaseException] = {}

    def target() -> None:
        try:
            handler(data)
        except Exception as exc:  # handler failures are reported, not raised
            outcome["error"] = exc

    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    thread.join(timeout)
    if thread.is_alive():
        return False, None
    return True, outcome.get("error")


@dataclass
class Worker:
    """Takes requests from an inbox and runs the handler for their type."""

    id: int
    handlers: Mapping[int, RequestHandler] = field(
        default_factory=lambda: dict(DEFAULT_HANDLERS)
    )
    poll_interval: float = 0.01

    def launch(self, inbox: queue.Queue, stop: queue.Queue) -> threading.Thread:
        """Start serving ``inbox`` in a thread until closed or signalled on ``stop``."""
        thread = threading.Thread(
            target=self._serve, args=(inbox, stop), name=f"worker-{self.id}", daemon=True
        )
        thread.start()
        return thread

    def _serve(self, inbox: queue.Queue, stop: queue.Queue) -> None:
        while True:
            try:
                stop.get_nowait()
            except queue.Empty:
                pass
            else:
                log.info("Stopping worker %d", self.id)
                return
            try:
                item = inbox.get(timeout=self.poll_interval)
            except queue.Empty:
                continue
            if item is _CLOSED:
                inbox.put(_CLOSED)
                log.info("Stopping worker %d", self.id)
                return
            self.process(item)

    def process(self, request: Request) -> bool:
        """Handle ``request`` with retries; return True once an attempt succeeds."""
        log.debug("Worker %d processing request %r", self.id, request)
        handler = self.handlers.get(request.type)
        if handler is None:
            log.warning("Worker %d: no handler for request type %d", self.id, request.type)
            return False
        timeout = request.timeout or DEFAULT_TIMEOUT
        for _ in range(request.retries + 1):
            finished, error = _call_with_timeout(handler, request.data, timeout)
            if finished and error is None:
                return True
            if finished:
                log.warning(
                    "Worker %d: error processing request %r: %s", self.id, request, error
                )
            else:
                log.warning("Worker %d: timeout processing request %r", self.id, request)
            log.info("Worker %d: retrying request %r", self.id, request)
        log.error(
            "Worker %d: failed to process request %r after %d retries",
            self.id,
            request,
            request.max_retries,
        )
        return False


class Dispatcher:
    """Hands requests to a pool of workers that can grow and shrink with load."""

    def __init__(
        self,
        buffer_size: int,
        max_workers: int,
        handlers: Mapping[int, RequestHandler] | None = None,
        tick: float = 0.001,
    ) -> None:
        self.buffer_size = buffer_size
        self.max_workers = max_workers
        self.handlers = dict(DEFAULT_HANDLERS if handlers is None else handlers)
        self.tick = tick
        self._inbox: queue.Queue = queue.Queue()
        self._stop_signals: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = threading.Event()
        self._threads: list[threading.Thread] = []
        self._worker_count = 0

    @property
    def worker_count(self) -> int:
        """Number of workers currently meant to be running."""
        return self._worker_count

    @property
    def pending(self) -> int:
        """Number of requests waiting in the inbox."""
        return self._inbox.qsize()

    def add_worker(self, worker: Worker) -> None:
        """Start ``worker`` on this dispatcher's inbox."""
        with self._lock:
            self._worker_count += 1
            self._threads.append(worker.launch(self._inbox, self._stop_signals))

    def remove_worker(self, min_workers: int) -> None:
        """Signal one worker to stop, unless only ``min_workers`` remain."""
        with self._lock:
            if self._worker_count > min_workers:
                self._worker_count -= 1
                self._stop_signals.put(None)

    def scale_workers(self, min_workers: int, max_workers: int, load_threshold: int) -> None:
        """Grow or shrink the pool with the inbox load until the dispatcher stops."""
        while not self._closed.wait(self.tick):
            load = self.pending
            if load > load_threshold and self._worker_count < max_workers:
                log.info("Scaling triggered")
                self.add_worker(Worker(self._worker_count, self.handlers))
            elif load < 0.75 * load_threshold and self._worker_count > min_workers:
                log.info("Reducing triggered")
                self.remove_worker(min_workers)

    def make_request(self, request: Request) -> bool:
        """Queue ``request``; return False if the inbox is full and it was dropped."""
        with self._lock:
            if self._closed.is_set():
                raise RuntimeError("dispatcher is stopped")
            if self._inbox.qsize() >= self.buffer_size:
                log.warning("Request channel is full. Dropping request.")
                return False
            self._inbox.put(request)
            return True

    def stop(self, timeout: float) -> bool:
        """Close the inbox and wait for workers to drain it.

        After ``timeout`` seconds the workers are told to stop. Returns True
        when they all finished on their own.
        """
        with self._lock:
            self._closed.set()
            self._inbox.put(_CLOSED)
            threads = list(self._threads)
        deadline = time.monotonic() + timeout
        for thread in threads:
            thread.join(max(0.0, deadline - time.monotonic()))
        graceful = not any(thread.is_alive() for thread in threads)
        if graceful:
            log.info("All workers stopped gracefully")
        else:
            log.warning("Timeout reached, forcing shutdown")
            for _ in range(self._worker_count):
                self._stop_signals.put(None)
        for thread in threads:
            thread.join()
        return graceful


def main(argv: Sequence[str] | None = None) -> int:
    """Push a batch of requests through a self-scaling worker pool."""
    parser = argparse.ArgumentParser(
        prog="workerpool", description="Run requests through a scaling worker pool."
    )
    parser.add_argument("--buffer-size", type=int, default=50000)
    parser.add_argument("--max-workers", type=int, default=10)
    parser.add_argument("--min-workers", type=int, default=3)
    parser.add_argument("--load-threshold", type=int, default=40000)
    parser.add_argument("--requests", type=int, default=50000)
    parser.add_argument("--stop-timeout", type=float, default=10.0)
    args = parser.parse_args(argv)

    print(f"Running with {os.cpu_count() or 1} CPUs")
    dispatcher = Dispatcher(args.buffer_size, args.max_workers)
    for worker_id in range(args.min_workers):
        print(f"Starting worker with id {worker_id}")
        dispatcher.add_worker(Worker(worker_id))

    scaler = threading.Thread(
        target=dispatcher.scale_workers,
        args=(args.min_workers, args.max_workers, args.load_threshold),
        daemon=True,
    )
    scaler.start()

    for i in range(args.requests):
        dispatcher.make_request(
            Request(data=f"(Msg_id: {i}) -> Hello", type=1, handler=_accept, timeout=5.0)
        )

    dispatcher.stop(args.stop_timeout)
    scaler.join()
    print("Exiting main!")
    return 0