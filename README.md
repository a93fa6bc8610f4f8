# prodcons

A multithreaded producer-consumer simulation. It is built around a bounded
buffer with two priorities.

Each producer thread puts 20 random items into a shared buffer of fixed
capacity. The item values run from 0 to 99, and about one item in four is
marked urgent. Consumer threads take items out of the buffer:

- Urgent items always come out first.
- Within each priority, items come out in first-in, first-out order.
- A producer blocks while the buffer is full, and a consumer blocks while it
  is empty. Blocking uses semaphores, so no thread busy-waits.

Once every producer has finished, one poison pill per consumer goes into the
buffer, and each consumer stops when it takes one out. A summary follows. It
gives:

- the number of items expected and the number consumed,
- the average time an item spent in the buffer,
- the throughput, measured from the first enqueue to the last dequeue.

## Installation

```
pip install .
```

## Command line

```
prodcons <num_producers> <num_consumers> <buffer_size>
```

All three arguments must be decimal integers from 1 to 2147483647. An example:

```
prodcons 3 2 5
```

Sample output. Values, timings and the order of lines differ from run to run:

```
[Producer-1] Produced item: 42 (priority 0)
[Consumer-2] Consumed item: 42 (priority 0)
...
[Producer-3] Finished producing 20 items.
[Consumer-1] Received poison pill. Exiting.

Summary:
  Total real items expected: 60
  Total real items consumed: 60
  Average latency: 0.041 ms
  Throughput: 51234.567 items per second
```

The exit status is one of:

- `0` when every produced item was consumed.
- `1` when the number of arguments is wrong. A usage line goes to stderr.
- `1` when an argument is not a positive integer.
- `1` when the produced and consumed counts do not match. A warning goes to
  stderr.

## Library use

```python
from prodcons.buffer import BoundedBuffer, Item, Priority
from prodcons.simulation import run_simulation

buf = BoundedBuffer(capacity=4, total_real_items=2)
buf.put(Item(7, Priority.NORMAL))
buf.put(Item(9, Priority.URGENT))
assert buf.get().value == 9   # urgent first
assert buf.get().value == 7
print(buf.stats())            # BufferStats snapshot

result = run_simulation(2, 2, 3, seed=1)
assert result.ok()
```

### `prodcons.buffer`

- `Priority` has the values `NORMAL` (0) and `URGENT` (1).
- `Item` is a frozen dataclass. `Item.poison_pill()` returns the stop signal.
  Poison pills always go through the normal queue.
- `BoundedBuffer(capacity, total_real_items=0)` raises `ValueError` when the
  capacity is not positive. Use its `put(item)` and `get()` methods to move
  items. `stats()` returns a `BufferStats` snapshot, which has the properties
  `average_latency_ms` and `throughput`.

### `prodcons.workers`

- `produce(worker_id, buffer, rng=None, out=None, items=20)` puts items into
  the buffer. It returns the list of items it produced.
- `consume(worker_id, buffer, out=None)` takes items until it gets a poison
  pill. It returns the list of real items it consumed.

Both functions write their log lines to `out`. When `out` is not given, they
write to stdout.

### `prodcons.simulation`

`run_simulation(producer_count, consumer_count, buffer_capacity, seed=None,
out=None)` runs the full simulation and returns a `SimulationResult`:

- The result's `summary()` method returns the summary text, and its `ok()`
  method reports whether every item was consumed.
- The per-item log lines and the summary are written to `out`, which defaults
  to stdout.
- `seed` seeds the random generator that all producers share. Thread
  scheduling still decides the order in which the producers draw from it.