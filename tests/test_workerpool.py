import queue
import threading
import time

import pytest

from algokit.workerpool import Dispatcher, Request, Worker, main


def _wait_for(condition, limit=3.0):
    deadline = time.monotonic() + limit
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.005)
    return condition()


def test_process_calls_handler_for_type():
    seen = []
    worker = Worker(0, {7: seen.append})
    assert worker.process(Request(data="hello", type=7, timeout=1.0)) is True
    assert seen == ["hello"]


def test_process_without_handler_fails():
    seen = []
    worker = Worker(0, {1: seen.append})
    assert worker.process(Request(data="x", type=2)) is False
    assert seen == []


def test_process_retries_until_success():
    calls = []

    def flaky(data):
        calls.append(data)
        if len(calls) < 3:
            raise RuntimeError("not yet")

    worker = Worker(0, {1: flaky})
    assert worker.process(Request(data="d", retries=2, timeout=1.0)) is True
    assert len(calls) == 3


def test_process_gives_up_after_retries():
    calls = []

    def broken(data):
        calls.append(data)
        raise RuntimeError("always")

    worker = Worker(0, {1: broken})
    assert worker.process(Request(data="d", retries=1, timeout=1.0)) is False
    assert len(calls) == 2


def test_process_times_out():
    worker = Worker(0, {1: lambda data: time.sleep(0.3)})
    assert worker.process(Request(data=None, timeout=0.02)) is False


def test_launch_stops_on_signal_before_taking_work():
    inbox, stop = queue.Queue(), queue.Queue()
    inbox.put(Request(data="left"))
    stop.put(None)
    thread = Worker(0).launch(inbox, stop)
    thread.join(2.0)
    assert not thread.is_alive()
    assert inbox.qsize() == 1


def test_dispatcher_processes_every_request():
    seen = []
    lock = threading.Lock()

    def record(data):
        with lock:
            seen.append(data)

    dispatcher = Dispatcher(100, 3)
    for i in range(3):
        dispatcher.add_worker(Worker(i, {1: record}))
    for i in range(20):
        assert dispatcher.make_request(Request(data=i, timeout=1.0))
    assert dispatcher.stop(5.0) is True
    assert sorted(seen) == list(range(20))


def test_make_request_drops_when_full():
    dispatcher = Dispatcher(2, 1)
    results = [dispatcher.make_request(Request(data=i)) for i in range(3)]
    assert results == [True, True, False]
    assert dispatcher.pending == 2
    dispatcher.stop(0.1)


def test_make_request_after_stop_raises():
    dispatcher = Dispatcher(10, 1)
    dispatcher.stop(0.1)
    with pytest.raises(RuntimeError):
        dispatcher.make_request(Request(data="late"))


def test_remove_worker_keeps_minimum():
    dispatcher = Dispatcher(10, 2)
    dispatcher.add_worker(Worker(0))
    dispatcher.add_worker(Worker(1))
    dispatcher.remove_worker(1)
    assert dispatcher.worker_count == 1
    dispatcher.remove_worker(1)
    assert dispatcher.worker_count == 1
    assert dispatcher.stop(2.0) is True


def test_stop_forces_shutdown_after_timeout():
    release = threading.Event()
    dispatcher = Dispatcher(10, 1, tick=0.001)
    dispatcher.add_worker(Worker(0, {1: lambda data: release.wait(2.0)}))
    for i in range(3):
        dispatcher.make_request(Request(data=i, timeout=0.3))
    try:
        assert dispatcher.stop(0.05) is False
    finally:
        release.set()


def test_scale_workers_grows_and_shrinks():
    dispatcher = Dispatcher(100, 3, handlers={1: lambda data: time.sleep(0.05)})
    dispatcher.add_worker(Worker(0, dispatcher.handlers))
    for i in range(30):
        dispatcher.make_request(Request(data=i, timeout=1.0))
    scaler = threading.Thread(target=dispatcher.scale_workers, args=(1, 3, 5), daemon=True)
    scaler.start()
    try:
        assert _wait_for(lambda: dispatcher.worker_count == 3)
        assert _wait_for(lambda: dispatcher.pending == 0 and dispatcher.worker_count == 1)
    finally:
        assert dispatcher.stop(5.0) is True
        scaler.join(2.0)
    assert not scaler.is_alive()


def test_main_runs_small_batch(capsys):
    code = main(
        [
            "--requests", "30",
            "--buffer-size", "100",
            "--min-workers", "2",
            "--max-workers", "4",
            "--load-threshold", "80",
        ]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Starting worker with id 1" in out
    assert out.rstrip().endswith("Exiting main!")