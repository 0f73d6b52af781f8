"""Kernel time – injectable clocks."""
from todo_abac.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
