"""Tests for seqkit/samples.py"""

import pytest

from seqkit.events import EventEmitter, EventType
from seqkit.samples import SAMPLES, WORDS, UNSORTED, run_sample


class TestSamples:
    def test_arrays(self):
        result = run_sample("arrays")
        assert result.lines[0] == "array = [\n  1,\n  4,\n  5,\n  8,\n]"
        assert "sum of array = 18" in result.lines
        assert "mul of array = 160" in result.lines

    def test_sort(self):
        result = run_sample("sort")
        assert result.lines == [
            "Before Sorting: 15, 3, 12, 6, -9, 9, 0, ",
            "After Sorting: -9, 0, 3, 6, 9, 12, 15, ",
        ]

    def test_sort_leaves_fixed_data_alone(self):
        run_sample("sort")
        assert UNSORTED == [15, 3, 12, 6, -9, 9, 0]

    def test_factorial(self):
        result = run_sample("factorial")
        assert result.lines[0] == "factorial of 0 is 1"
        assert result.lines[-1] == "factorial of 5 is 120"
        assert len(result.lines) == 6

    def test_dedup(self):
        result = run_sample("dedup")
        assert result.data["unique"] == [-6, -1, 2, 3, 5, 7]
        assert result.lines[-1] == "size of result = 6"

    def test_strings(self):
        result = run_sample("strings")
        assert len(WORDS) == 17
        assert result.data["unique"] == [
            "apple", "banana", "cherry", "date", "fig", "grape",
            "kiwi", "lemon", "mango", "olive", "pear",
        ]
        assert result.lines[0] == "size of words = 17"
        assert result.lines[-1] == "size of unique words = 11"

    def test_every_sample_runs(self):
        for name in SAMPLES:
            result = run_sample(name)
            assert result.name == name
            assert result.text


class TestRunSample:
    def test_unknown_name(self):
        with pytest.raises(KeyError, match="unknown sample"):
            run_sample("bogus")

    def test_emits_events(self):
        emitter = EventEmitter()
        run_sample("sort", emitter=emitter)
        types = [e.event_type for e in emitter.events]
        assert types == [EventType.SAMPLE_START, EventType.SAMPLE_COMPLETE]
        assert emitter.events[-1].data == {"sample": "sort"}
