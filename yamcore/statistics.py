"""Counters and node sets recorded during a build."""

from __future__ import annotations

from typing import Any


class ExecutionStatistics:
    """Counts started and self-executed nodes, optionally remembering them."""

    def __init__(self) -> None:
        self.n_started = 0
        self.n_self_executed = 0
        self.register_nodes = False
        self.started: set[Any] = set()
        self.self_executed: set[Any] = set()

    def reset(self) -> None:
        """Zero the counters and empty the node sets; register_nodes is kept."""
        self.n_started = 0
        self.n_self_executed = 0
        self.started.clear()
        self.self_executed.clear()

    def register_started(self, node: Any) -> None:
        self.n_started += 1
        if self.register_nodes:
            self.started.add(node)

    def register_self_executed(self, node: Any) -> None:
        self.n_self_executed += 1
        if self.register_nodes:
            self.self_executed.add(node)