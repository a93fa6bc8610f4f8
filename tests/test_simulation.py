import io
import re
from collections import Counter

import pytest

from prodcons.buffer import ITEMS_PER_PRODUCER, BufferStats
from prodcons.simulation import SimulationResult, run_simulation


def test_all_items_consumed():
    out = io.StringIO()
    result = run_simulation(2, 3, 5, seed=1, out=out)
    expected = 2 * ITEMS_PER_PRODUCER
    assert result.ok()
    assert result.stats.real_items_target == expected
    assert result.stats.real_items_seen == expected
    assert result.stats.latency_samples == expected
    text = out.getvalue()
    assert text.count("Received poison pill. Exiting.") == 3
    assert text.count("Consumed item:") == expected
    assert f"Total real items consumed: {expected}" in text
    assert "Average latency:" in text and "Throughput:" in text


def test_summary_written_matches_result():
    out = io.StringIO()
    result = run_simulation(1, 1, 1, seed=2, out=out)
    assert out.getvalue().endswith(result.summary())
    assert result.summary().startswith("\nSummary:\n")


def test_no_producers():
    out = io.StringIO()
    result = run_simulation(0, 2, 1, out=out)
    assert result.ok()
    assert result.stats.real_items_seen == 0
    assert "Average latency" not in result.summary()
    assert out.getvalue().count("Received poison pill") == 2


def test_invalid_capacity():
    with pytest.raises(ValueError):
        run_simulation(1, 1, 0, out=io.StringIO())


def test_negative_counts():
    with pytest.raises(ValueError):
        run_simulation(-1, 1, 1, out=io.StringIO())


def test_single_producer_seed_is_reproducible():
    def consumed(seed):
        out = io.StringIO()
        run_simulation(1, 2, 4, seed=seed, out=out)
        return Counter(re.findall(r"Consumed item: (\d+) \(priority (\d)\)", out.getvalue()))

    assert consumed(9) == consumed(9)
    assert sum(consumed(9).values()) == ITEMS_PER_PRODUCER


def test_result_not_ok_on_mismatch():
    stats = BufferStats(5, 4, 0, 4, None, None)
    result = SimulationResult(1, 1, 1, stats)
    assert not result.ok()
    assert "Total real items expected: 5" in result.summary()
    assert "Average latency" not in result.summary()