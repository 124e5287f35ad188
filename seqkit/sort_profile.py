"""Operation counts and timings for the insertion sort.

``sort`` is run on pre-sorted (best case), shuffled, and reversed (worst
case) inputs of distinct ints. Elements are wrapped so every comparison the
sort makes is tallied, and the list tallies every slot write; each element
from index 1 on is written back once, the remaining writes are shifts.

Exports:
    make_input(case, size, seed) -> list[int]
    count_operations(data) -> (comparisons, shifts)
    profile_sort(input_sizes, cases, iterations, seed, emitter) -> list[SortProfile]
    growth_exponents(profiles, case, field) -> list[float]
"""

import random
import time
import tracemalloc

import numpy as np

from seqkit.config import DEFAULT_INPUT_SIZES, DEFAULT_ITERATIONS, RANDOM_SEED
from seqkit.events import EventType
from seqkit.models import SortProfile
from seqkit.sequence_utils import size, sort

CASES = ("sorted", "random", "reversed")


class _Tally:
    __slots__ = ("count",)

    def __init__(self):
        self.count = 0


class TalliedItem:
    """Wraps a value; every ``<`` or ``>`` on it bumps a shared tally."""

    __slots__ = ("value", "_tally")

    def __init__(self, value, tally):
        self.value = value
        self._tally = tally

    def __lt__(self, other):
        self._tally.count += 1
        return self.value < other.value

    def __gt__(self, other):
        self._tally.count += 1
        return self.value > other.value


class TallyingList(list):
    """List that counts item assignments."""

    def __init__(self, items=()):
        super().__init__(items)
        self.writes = 0

    def __setitem__(self, index, value):
        self.writes += 1
        super().__setitem__(index, value)


def make_input(case, size, seed=RANDOM_SEED):
    """Distinct ints ``0..size-1`` laid out for the given case.

    Raises:
        ValueError: for an unknown case or a negative size.
    """
    if size < 0:
        raise ValueError(f"input size must be >= 0, got {size}")
    if case == "sorted":
        return list(range(size))
    if case == "reversed":
        return list(range(size - 1, -1, -1))
    if case == "random":
        return random.Random(seed + size).sample(range(size), size)
    raise ValueError(f"unknown case {case!r}; choose from {', '.join(CASES)}")


def count_operations(data):
    """Sort a copy of ``data`` and return ``(comparisons, shifts)``."""
    tally = _Tally()
    seq = TallyingList(TalliedItem(value, tally) for value in data)
    sort(seq)
    placements = max(size(seq) - 1, 0)
    return tally.count, seq.writes - placements


def time_sort(data, iterations=DEFAULT_ITERATIONS):
    """Best wall time in ms of sorting a fresh copy of ``data``."""
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    best = None
    for _ in range(iterations):
        seq = list(data)
        start = time.perf_counter()
        sort(seq)
        elapsed_ms = (time.perf_counter() - start) * 1000
        if best is None or elapsed_ms < best:
            best = elapsed_ms
    return best


def peak_memory_kb(data):
    """Peak traced allocation, in KiB, while sorting a copy of ``data``.

    Leaves tracing on if the caller already had it on.
    """
    seq = list(data)
    started_here = not tracemalloc.is_tracing()
    if started_here:
        tracemalloc.start()
    try:
        tracemalloc.reset_peak()
        baseline, _ = tracemalloc.get_traced_memory()
        sort(seq)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if started_here:
            tracemalloc.stop()
    return max(peak - baseline, 0) / 1024


def profile_sort(input_sizes=None, cases=CASES, iterations=None, seed=RANDOM_SEED, emitter=None):
    """Profile ``sort`` for every (case, size) pair, cases outermost."""
    if input_sizes is None:
        input_sizes = DEFAULT_INPUT_SIZES
    if iterations is None:
        iterations = DEFAULT_ITERATIONS
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    profiles = []
    for case in cases:
        for n in input_sizes:
            data = make_input(case, n, seed)
            comparisons, shifts = count_operations(data)
            profile = SortProfile(
                case=case,
                input_size=n,
                comparisons=comparisons,
                shifts=shifts,
                time_ms=round(time_sort(data, iterations), 3),
                memory_kb=round(peak_memory_kb(data), 3),
            )
            profiles.append(profile)

            if emitter is not None:
                emitter.complete(
                    EventType.PROFILE_POINT, "sort_profile",
                    f"{case} n={n}: {comparisons} comparisons, {shifts} shifts",
                    data={"case": case, "input_size": n,
                          "comparisons": comparisons, "shifts": shifts},
                )
    return profiles


def growth_exponents(profiles, case, field="comparisons"):
    """Exponent k in ``count ~ n^k`` between consecutive profiled sizes.

    Sizes or counts of zero carry no growth information and are skipped.
    """
    counts = {}
    for p in profiles:
        if p.case == case:
            counts[p.input_size] = getattr(p, field)

    points = sorted((n, c) for n, c in counts.items() if n > 0 and c > 0)
    if len(points) < 2:
        return []

    sizes = np.log(np.array([n for n, _ in points], dtype=float))
    values = np.log(np.array([c for _, c in points], dtype=float))
    exponents = np.diff(values) / np.diff(sizes)
    return [round(float(k), 2) for k in exponents]
