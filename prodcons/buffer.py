"""Bounded two-priority buffer shared between producer and consumer threads."""

from __future__ import annotations

import threading
import time
from collections import deque
from dataclasses import dataclass, replace
from enum import IntEnum

ITEMS_PER_PRODUCER = 20
POISON_PILL_VALUE = -1


class Priority(IntEnum):
    """Priority of an item in the buffer."""

    NORMAL = 0
    URGENT = 1


@dataclass(frozen=True)
class Item:
    """A value travelling through the buffer."""

    value: int
    priority: Priority = Priority.NORMAL
    is_poison: bool = False
    enqueue_time_ns: int | None = None

    @classmethod
    def poison_pill(cls) -> Item:
        """Return the sentinel that tells a consumer to stop."""
        return cls(value=POISON_PILL_VALUE, priority=Priority.NORMAL, is_poison=True)


@dataclass(frozen=True)
class BufferStats:
    """Snapshot of the buffer's counters and timing metrics."""

    real_items_target: int
    real_items_seen: int
    total_latency_ns: int
    latency_samples: int
    first_enqueue_ns: int | None
    last_dequeue_ns: int | None

    @property
    def average_latency_ms(self) -> float:
        """Mean time items spent in the buffer, in milliseconds."""
        if self.latency_samples == 0:
            return 0.0
        return self.total_latency_ns / self.latency_samples / 1e6

    @property
    def throughput(self) -> float:
        """Items consumed per second between first enqueue and last dequeue."""
        if self.first_enqueue_ns is None or self.last_dequeue_ns is None:
            return 0.0
        total_ns = self.last_dequeue_ns - self.first_enqueue_ns
        if total_ns <= 0:
            return 0.0
        return self.latency_samples / (total_ns / 1e9)


class BoundedBuffer:
    """Blocking bounded buffer that always serves urgent items first.

    Within each priority, items come out in the order they went in. Poison
    pills always travel through the normal queue.
    """

    def __init__(self, capacity: int, total_real_items: int = 0) -> None:
        if capacity <= 0:
            raise ValueError("Buffer capacity must be positive.")
        self.capacity = capacity
        self._urgent: deque[Item] = deque()
        self._normal: deque[Item] = deque()
        self._slots_free = threading.Semaphore(capacity)
        self._slots_used = threading.Semaphore(0)
        self._lock = threading.Lock()

        self._real_items_target = total_real_items
        self._real_items_seen = 0
        self._total_latency_ns = 0
        self._latency_samples = 0
        self._first_enqueue_ns: int | None = None
        self._last_dequeue_ns: int | None = None

    def put(self, item: Item) -> None:
        """Insert an item, blocking while the buffer is full."""
        self._slots_free.acquire()
        with self._lock:
            if not item.is_poison:
                now = time.monotonic_ns()
                item = replace(item, enqueue_time_ns=now)
                if self._first_enqueue_ns is None:
                    self._first_enqueue_ns = now
            if not item.is_poison and item.priority == Priority.URGENT:
                self._urgent.append(item)
            else:
                self._normal.append(item)
        self._slots_used.release()

    def get(self) -> Item:
        """Remove and return the next item, blocking while the buffer is empty."""
        self._slots_used.acquire()
        with self._lock:
            result = self._urgent.popleft() if self._urgent else self._normal.popleft()
            if not result.is_poison:
                self._real_items_seen += 1
                now = time.monotonic_ns()
                enqueued = result.enqueue_time_ns if result.enqueue_time_ns is not None else now
                self._total_latency_ns += max(0, now - enqueued)
                self._latency_samples += 1
                self._last_dequeue_ns = now
        self._slots_free.release()
        return result

    def stats(self) -> BufferStats:
        """Return a consistent snapshot of the counters."""
        with self._lock:
            return BufferStats(
                real_items_target=self._real_items_target,
                real_items_seen=self._real_items_seen,
                total_latency_ns=self._total_latency_ns,
                latency_samples=self._latency_samples,
                first_enqueue_ns=self._first_enqueue_ns,
                last_dequeue_ns=self._last_dequeue_ns,
            )