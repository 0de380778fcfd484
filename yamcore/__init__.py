"""Build engine infrastructure: delegates, dispatch queues, thread pools, statistics and a node registry."""

__version__ = "0.1.0"