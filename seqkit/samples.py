"""Sample programs over fixed literal data.

Each sample builds its own data, runs it through the sequence utilities and
returns the lines it would print. ``run_sample`` is the single entry point
used by the CLI.
"""

from __future__ import annotations

from typing import Callable, Optional

from seqkit.events import EventEmitter, EventType
from seqkit.models import SampleResult
from seqkit.reductions import factorial, mul, sum
from seqkit.render import format_inline, format_sequence
from seqkit.sequence_utils import remove_duplicates, size, sort


# ── Fixed data ───────────────────────────────────────────────

ARRAY = [1, 4, 5, 8]
UNSORTED = [15, 3, 12, 6, -9, 9, 0]
FACTORIAL_RANGE = range(0, 6)
MERGE_LEFT = [-1, 3, 2, 5]
MERGE_RIGHT = [3, 2, -6, 7]
WORDS = [
    "pear", "apple", "fig", "banana", "kiwi", "apple", "cherry", "date",
    "fig", "grape", "lemon", "banana", "mango", "kiwi", "olive", "pear",
    "apple",
]


# ── Samples ──────────────────────────────────────────────────

def arrays_sample() -> SampleResult:
    array = list(ARRAY)
    total = sum(array)
    product = mul(array)
    lines = ["array = " + format_sequence(array)]
    lines.append(f"sum of array = {total}")
    lines.append(f"mul of array = {product}")
    return SampleResult("arrays", lines, {"array": array, "sum": total, "mul": product})


def sort_sample() -> SampleResult:
    arr = list(UNSORTED)
    lines = ["Before Sorting: " + format_inline(arr)]
    sort(arr)
    lines.append("After Sorting: " + format_inline(arr))
    return SampleResult("sort", lines, {"before": list(UNSORTED), "after": arr})


def factorial_sample() -> SampleResult:
    values = {}
    lines = []
    for number in FACTORIAL_RANGE:
        values[number] = factorial(number)
        lines.append(f"factorial of {number} is {values[number]}")
    return SampleResult("factorial", lines, {"factorials": values})


def dedup_sample() -> SampleResult:
    merged = MERGE_LEFT + MERGE_RIGHT
    sort(merged)
    unique = remove_duplicates(merged)
    lines = ["merged = " + format_sequence(merged)]
    lines.append("unique = " + format_sequence(unique))
    lines.append(f"size of result = {size(unique)}")
    return SampleResult("dedup", lines, {"merged": merged, "unique": unique})


def strings_sample() -> SampleResult:
    words = list(WORDS)
    sort(words)
    unique = remove_duplicates(words)
    lines = [f"size of words = {size(words)}"]
    lines.append("unique words = " + format_sequence(unique))
    lines.append(f"size of unique words = {size(unique)}")
    return SampleResult("strings", lines, {"sorted": words, "unique": unique})


SAMPLES: dict[str, Callable[[], SampleResult]] = {
    "arrays": arrays_sample,
    "sort": sort_sample,
    "factorial": factorial_sample,
    "dedup": dedup_sample,
    "strings": strings_sample,
}


def run_sample(name: str, emitter: Optional[EventEmitter] = None) -> SampleResult:
    """Run one sample by name.

    Raises:
        KeyError: if no sample has that name.
    """
    if name not in SAMPLES:
        raise KeyError(f"unknown sample {name!r}; choose from {', '.join(SAMPLES)}")

    if emitter is not None:
        emitter.complete(EventType.SAMPLE_START, "samples", f"Running {name}")

    result = SAMPLES[name]()

    if emitter is not None:
        emitter.complete(
            EventType.SAMPLE_COMPLETE, "samples",
            f"{name}: {len(result.lines)} lines",
            data={"sample": name},
        )
    return result
