import threading
import time

from yamcore.delegates import Delegate
from yamcore.dispatcher import Dispatcher

X = 5
Y = 10
SUM = X + Y


def test_push_pop_and_execute():
    results = {"r1": -1, "r2": -1}

    def l1add():
        results["r1"] = X + Y
        return results["r1"]

    def l2add():
        results["r2"] = X + Y
        return results["r2"]

    q = Dispatcher()
    q.push(Delegate(l1add))
    q.push(Delegate(l2add))
    assert len(q) == 2

    d1 = q.pop()
    d2 = q.pop()
    assert q.empty()
    assert d1.execute() == SUM
    assert d2.execute() == SUM

    assert results == {"r1": SUM, "r2": SUM}


def test_start_stop():
    results = {"r1": -1}

    def l1add():
        results["r1"] = X + Y

    q = Dispatcher()
    q.stop()
    q.push(Delegate(l1add))
    d0 = q.pop()
    assert not d0.is_bound()
    assert len(q) == 1

    q.start()
    d1 = q.pop()
    assert d1.is_bound()
    d1.execute()
    assert results["r1"] == SUM


def test_fifo_order():
    q = Dispatcher()
    for value in ["a", "b", "c"]:
        q.push(Delegate(lambda v=value: v))
    assert [q.pop().execute() for _ in range(3)] == ["a", "b", "c"]


def test_push_wraps_plain_callable():
    q = Dispatcher()
    q.push(lambda: SUM)
    assert q.pop().execute() == SUM


def test_size_and_empty():
    q = Dispatcher()
    assert q.empty()
    assert len(q) == 0
    q.push(lambda: None)
    q.push(lambda: None)
    assert not q.empty()
    assert len(q) == 2
    q.pop()
    assert len(q) == 1


def test_initial_flags():
    q = Dispatcher()
    assert q.started()
    assert not q.stopped()
    assert not q.suspended()


def test_suspend_blocks_pop_until_resumed():
    q = Dispatcher()
    q.suspend()
    assert q.suspended()
    q.push(lambda: SUM)
    popped = []
    t = threading.Thread(target=lambda: popped.append(q.pop()), daemon=True)
    t.start()
    time.sleep(0.05)
    assert popped == []
    q.resume()
    t.join(timeout=5)
    assert not t.is_alive()
    assert popped[0].execute() == SUM
    assert not q.suspended()


def test_stop_unblocks_waiting_pop():
    q = Dispatcher()
    popped = []
    t = threading.Thread(target=lambda: popped.append(q.pop()), daemon=True)
    t.start()
    time.sleep(0.05)
    assert popped == []
    q.stop()
    t.join(timeout=5)
    assert not t.is_alive()
    assert not popped[0].is_bound()
    assert q.stopped()