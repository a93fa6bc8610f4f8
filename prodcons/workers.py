"""Producer and consumer routines run by the simulation's threads."""

from __future__ import annotations

import random
import sys
from typing import TextIO

from prodcons.buffer import ITEMS_PER_PRODUCER, BoundedBuffer, Item, Priority


def _emit(out: TextIO, line: str) -> None:
    out.write(line + "\n")


def produce(
    worker_id: int,
    buffer: BoundedBuffer,
    rng: random.Random | None = None,
    out: TextIO | None = None,
    items: int = ITEMS_PER_PRODUCER,
) -> list[Item]:
    """Put ``items`` random values into the buffer; about a quarter are urgent."""
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    produced = []
    for _ in range(items):
        value = rng.randrange(100)
        priority = Priority.URGENT if rng.randrange(4) == 0 else Priority.NORMAL
        item = Item(value, priority)
        buffer.put(item)
        produced.append(item)
        _emit(out, f"[Producer-{worker_id}] Produced item: {value} (priority {int(priority)})")
    _emit(out, f"[Producer-{worker_id}] Finished producing {items} items.")
    return produced


def consume(
    worker_id: int,
    buffer: BoundedBuffer,
    out: TextIO | None = None,
) -> list[Item]:
    """Take items from the buffer until a poison pill arrives."""
    out = out if out is not None else sys.stdout
    consumed = []
    while True:
        item = buffer.get()
        if item.is_poison:
            _emit(out, f"[Consumer-{worker_id}] Received poison pill. Exiting.")
            return consumed
        consumed.append(item)
        _emit(
            out,
            f"[Consumer-{worker_id}] Consumed item: {item.value} (priority {int(item.priority)})",
        )