import pytest

from yamcore.delegates import Delegate
from yamcore.dispatcher import Dispatcher
from yamcore.worker import Worker

X = 5
Y = 10
SUM = X + Y


def test_process_and_stop():
    results = {"r1": -1, "r2": -1}

    def l1add():
        results["r1"] = X + Y

    def l2add():
        results["r2"] = X + Y

    q = Dispatcher()
    t1 = Worker(q, "t1")
    t2 = Worker(q, "t2")

    q.push(Delegate(l1add))
    q.push(Delegate(l2add))
    q.push(Delegate(q.stop))

    t1.join()
    t2.join()

    assert results == {"r1": SUM, "r2": SUM}
    assert q.stopped()


def test_name():
    q = Dispatcher()
    worker = Worker(q, "t1")
    q.stop()
    worker.join()
    assert worker.name() == "t1"


def test_joinable_until_joined():
    q = Dispatcher()
    worker = Worker(q, "w")
    assert worker.joinable()
    q.stop()
    worker.join()
    assert not worker.joinable()
    with pytest.raises(RuntimeError):
        worker.join()


def test_worker_on_stopped_dispatcher_finishes_without_running_work():
    q = Dispatcher()
    q.stop()
    ran = []
    q.push(lambda: ran.append(1))
    worker = Worker(q, "w")
    worker.join()
    assert ran == []
    assert len(q) == 1