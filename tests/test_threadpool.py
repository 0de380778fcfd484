import threading

import pytest

from yamcore.dispatcher import Dispatcher
from yamcore.threadpool import ThreadPool

X = 5
Y = 10
SUM = X + Y
N_ITERATIONS = 1000


class _Counter:
    def __init__(self):
        self._lock = threading.Lock()
        self.count = 0
        self.r1 = -1
        self.r2 = -1

    def l1add(self):
        with self._lock:
            self.r1 = X + Y
            self.count += 1

    def l2add(self):
        with self._lock:
            self.r2 = X + Y
            self.count += 1


def test_process_and_join():
    counter = _Counter()
    q = Dispatcher()
    pool = ThreadPool(q, "YAM", 4)

    for _ in range(N_ITERATIONS):
        q.push(counter.l1add)
        q.push(counter.l2add)
    pool.join()

    assert pool.size() == 0
    assert counter.count == 2 * N_ITERATIONS
    assert counter.r1 == SUM
    assert counter.r2 == SUM
    assert q.empty()


def test_process_and_change_size():
    counter = _Counter()
    q = Dispatcher()
    pool = ThreadPool(q, "YAM", 4)

    q.suspend()
    for _ in range(N_ITERATIONS):
        q.push(counter.l1add)
        q.push(counter.l2add)
    q.resume()
    pool.resize(2)
    assert pool.size() == 2
    pool.resize(6)
    assert pool.size() == 6
    pool.join()

    assert pool.size() == 0
    assert counter.count == 2 * N_ITERATIONS
    assert counter.r1 == SUM
    assert counter.r2 == SUM


def test_join_leaves_dispatcher_stopped():
    q = Dispatcher()
    pool = ThreadPool(q, "YAM", 2)
    pool.join()
    assert q.stopped()


def test_resize_restarts_dispatcher():
    q = Dispatcher()
    pool = ThreadPool(q, "YAM", 3)
    pool.resize(0)
    assert pool.size() == 0
    assert q.started()


def test_join_on_empty_pool_keeps_dispatcher_running():
    q = Dispatcher()
    pool = ThreadPool(q, "YAM", 0)
    pool.join()
    assert pool.size() == 0
    assert q.started()


def test_negative_size_rejected():
    q = Dispatcher()
    pool = ThreadPool(q, "YAM", 1)
    with pytest.raises(ValueError):
        pool.resize(-1)
    assert pool.size() == 1
    pool.join()
    assert pool.size() == 0