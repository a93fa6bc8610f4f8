"""Runs producers and consumers against one shared buffer."""

from __future__ import annotations

import random
import sys
import threading
from dataclasses import dataclass
from typing import TextIO

from prodcons.buffer import ITEMS_PER_PRODUCER, BoundedBuffer, BufferStats, Item
from prodcons.workers import consume, produce


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one simulation run."""

    producer_count: int
    consumer_count: int
    buffer_capacity: int
    stats: BufferStats

    def summary(self) -> str:
        """Return the human-readable summary block."""
        lines = [
            "",
            "Summary:",
            f"  Total real items expected: {self.stats.real_items_target}",
            f"  Total real items consumed: {self.stats.real_items_seen}",
        ]
        if self.stats.latency_samples > 0 and self.stats.first_enqueue_ns is not None:
            lines.append(f"  Average latency: {self.stats.average_latency_ms:.3f} ms")
            lines.append(f"  Throughput: {self.stats.throughput:.3f} items per second")
        return "\n".join(lines) + "\n"

    def ok(self) -> bool:
        """True when every produced item was consumed."""
        return self.stats.real_items_seen == self.stats.real_items_target


def run_simulation(
    producer_count: int,
    consumer_count: int,
    buffer_capacity: int,
    seed: int | None = None,
    out: TextIO | None = None,
) -> SimulationResult:
    """Run all workers to completion, stop consumers with poison pills, report."""
    if producer_count < 0 or consumer_count < 0:
        raise ValueError("Thread counts must not be negative.")
    out = out if out is not None else sys.stdout
    buffer = BoundedBuffer(buffer_capacity, producer_count * ITEMS_PER_PRODUCER)
    rng = random.Random(seed)

    producers = [
        threading.Thread(target=produce, args=(n, buffer, rng, out), name=f"producer-{n}")
        for n in range(1, producer_count + 1)
    ]
    consumers = [
        threading.Thread(target=consume, args=(n, buffer, out), name=f"consumer-{n}")
        for n in range(1, consumer_count + 1)
    ]
    for thread in producers + consumers:
        thread.start()

    for thread in producers:
        thread.join()
    for _ in consumers:
        buffer.put(Item.poison_pill())
    for thread in consumers:
        thread.join()

    result = SimulationResult(producer_count, consumer_count, buffer_capacity, buffer.stats())
    out.write(result.summary())
    return result