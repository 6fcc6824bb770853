from .timers import Timer
from .metrics import speedup, throughput, max_relative_error

__all__ = [
    "Timer",
    "speedup",
    "throughput",
    "max_relative_error",
]
