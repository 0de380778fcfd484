# yamcore

`yamcore` provides the building blocks that an incremental build engine runs
on. It has callable wrappers, subscriber lists, a blocking queue of actions,
worker threads and thread pools that drain that queue, counters for build
statistics, and a registry of named nodes. It has no dependencies outside the
standard library.

## Modules

- `yamcore.delegates.Delegate` wraps one callable. Any payload arguments given
  at bind time are passed after the call-time arguments. `Delegate.weak(method)`
  and `bind_weak` hold a bound method without keeping its object alive. When
  that object has been collected, calling the delegate does nothing and
  returns `None`. `execute` raises `RuntimeError` when nothing is bound.
  `execute_if_bound` returns `None` in that case. `owner`, `is_bound_to`,
  `clear_if_bound_to` and `clear` inspect or drop the target.
- `yamcore.multicast.MulticastDelegate` is a list of callbacks. `add`,
  `add_weak` and `add_delegate` each return a `DelegateHandle`. `broadcast`
  calls every registered callback. `remove(handle)` removes a callback and
  invalidates the handle. `remove_object`, `remove_all` and `compress` tidy
  the list. A removal made while a broadcast is running only empties a slot,
  so the list keeps its order during the broadcast.
- `yamcore.dispatcher.Dispatcher` is a thread-safe FIFO queue of delegates.
  `push` accepts a `Delegate` or a plain callable. `pop` blocks until the
  queue is non-empty and not suspended, or until the dispatcher is stopped.
  A stopped dispatcher's `pop` returns an unbound `Delegate`.
  `suspend`/`resume` and `start`/`stop` control dispatching.
- `yamcore.worker.Worker` is a thread that runs delegates popped from a
  dispatcher until the dispatcher is stopped.
- `yamcore.threadpool.ThreadPool` is a set of workers named `<name>_<index>`.
  `resize` stops the dispatcher, joins every worker, restarts the dispatcher
  and creates new workers. `join` runs every queued delegate, then stops the
  dispatcher and joins the workers.
- `yamcore.incremental_pool.IncrementalThreadPool` is a pool of
  `StoppableWorker`s that can grow or shrink while processing goes on. Only
  the surplus workers are stopped when it shrinks. Its `join` also runs every
  queued delegate before it removes the workers.
- `yamcore.statistics.ExecutionStatistics` counts started and self-executed
  nodes. When `register_nodes` is true it also records them in the sets
  `started` and `self_executed`.
- `yamcore.nodeset.NodeSet` stores objects keyed by their `name` as a path. The
  name may be an attribute or a method. `add` raises `ValueError` on a
  duplicate name. `remove` raises `KeyError` when the name is absent. It also
  has `add_if_absent`, `remove_if_present`, `find`, `in` and `len`.
- `yamcore.context.ExecutionContext` owns a main-thread dispatcher with its
  worker, a thread-pool dispatcher with a `ThreadPool` (one thread by
  default), an `ExecutionStatistics` and a `NodeSet`. `close()`, or leaving a
  `with` block, stops and joins all of its threads.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Examples

```python
from yamcore.delegates import Delegate
from yamcore.multicast import MulticastDelegate

add_ten = Delegate(lambda x, payload: x + payload, 10)
assert add_ten.execute(5) == 15

results = []
events = MulticastDelegate()
handle = events.add(lambda a, b: results.append(a + b))
events.broadcast(5, 10)
assert results == [15]
assert events.remove(handle) and not handle.is_valid()
```

```python
import threading

from yamcore.dispatcher import Dispatcher
from yamcore.threadpool import ThreadPool

count = 0
lock = threading.Lock()

def work():
    global count
    with lock:
        count += 1

queue = Dispatcher()
pool = ThreadPool(queue, "pool", 4)
for _ in range(1000):
    queue.push(work)
pool.join()          # runs everything queued, then stops the workers
assert count == 1000 and pool.size() == 0
```

```python
from yamcore.context import ExecutionContext

with ExecutionContext() as context:
    context.statistics().register_nodes = True
    context.thread_pool_queue().push(lambda: print("on the pool"))
    context.main_thread_queue().push(lambda: print("on the main thread"))
```

## What the package does not do

The package has no build graph. It has no node types with prerequisites,
inputs and outputs. It does not hash files or computed results, and it runs no
commands. `ExecutionContext`, `ExecutionStatistics` and `NodeSet` are ready to
hold and count such nodes, but the package does not define them. Any object
with a `name` can be stored in a `NodeSet`. The package also has no
command-line tool.

## Running the tests

```
pytest
```