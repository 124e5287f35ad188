"""Size, containment, deduplication and insertion sort over ordered sequences.

Equality here is derived from the ordering alone: two values are equal when
neither is strictly less than nor strictly greater than the other. Element
types only need to supply ``<`` and ``>``.

Exports:
    size(seq) -> int
    equals(a, b) -> bool
    contains(seq, item) -> bool
    remove_duplicates(seq) -> list
    sort(seq) -> None
"""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def size(seq: Sequence[Any]) -> int:
    """Count the elements of ``seq`` by walking it (``len`` is not used)."""
    count = 0
    for _ in seq:
        count = count + 1
    return count


def equals(a: Any, b: Any) -> bool:
    """Order-derived equality: ``not (a < b) and not (a > b)``."""
    return not (a < b) and not (a > b)


def contains(seq: Sequence[Any], item: Any) -> bool:
    """Return True if some element of ``seq`` is order-equal to ``item``."""
    for element in seq:
        if equals(element, item):
            return True
    return False


def remove_duplicates(seq: Sequence[Any]) -> list:
    """Return a new list holding the first occurrence of each distinct value.

    The input is left untouched. Distinctness uses :func:`equals`, and the
    result keeps the order in which values first appear.

    Raises:
        ValueError: if ``seq`` is empty.
    """
    if size(seq) == 0:
        raise ValueError("remove_duplicates requires a non-empty sequence")

    result = [seq[0]]
    for element in seq:
        if not contains(result, element):
            result.append(element)
    return result


def sort(seq: MutableSequence[Any]) -> None:
    """Sort ``seq`` ascending, in place, with insertion sort.

    Each element from index 1 onwards is held out while larger predecessors
    shift one slot right; it is dropped into the hole left behind.
    """
    last_index = size(seq) - 1
    if last_index < 1:
        return

    for i in range(1, last_index + 1):
        temp = seq[i]
        hole_position = i

        while hole_position > 0 and seq[hole_position - 1] > temp:
            seq[hole_position] = seq[hole_position - 1]
            hole_position = hole_position - 1
        seq[hole_position] = temp
