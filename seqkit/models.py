"""Shared data contracts.

Result records are plain dataclasses; input that arrives from the command
line is validated with pydantic before it reaches the sequence utilities.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from pydantic import BaseModel, model_validator


# ── Sort profiling ──────────────────────────────────────────

@dataclass
class SortProfile:
    """Operation counts and timing of one insertion sort run."""
    case: str                           # "sorted" | "random" | "reversed"
    input_size: int
    comparisons: int                    # element ">" tests made by the inner loop
    shifts: int                         # elements moved one slot right
    time_ms: float = 0.0                # best of the timed runs
    memory_kb: float = 0.0              # peak growth while sorting


# ── Samples ─────────────────────────────────────────────────

@dataclass
class SampleResult:
    """Printed lines of one sample program plus the values it computed."""
    name: str
    lines: list[str] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


# ── Requests ────────────────────────────────────────────────

class SequenceRequest(BaseModel):
    """Items given on the command line.

    Items are coerced to ints unless ``as_strings`` is set, in which case
    they are kept as text.
    """
    items: list[Union[int, str]]
    as_strings: bool = False

    @model_validator(mode="after")
    def _coerce_items(self):
        if self.as_strings:
            self.items = [str(item) for item in self.items]
            return self

        coerced = []
        for item in self.items:
            if isinstance(item, int):
                coerced.append(item)
                continue
            try:
                coerced.append(int(item.strip()))
            except ValueError:
                raise ValueError(f"not an integer: {item!r} (use --strings for text items)")
        self.items = coerced
        return self
