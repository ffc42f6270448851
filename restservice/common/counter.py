# restservice/common/counter.py

import threading


class AtomicCounter:
    """
    Process-wide id source. Every call to next() hands out a value no other
    caller has seen, in the order callers reach the lock.
    """

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        with self._lock:
            return self._next
