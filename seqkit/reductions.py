"""Folds over number sequences: sum, product, factorial."""

from __future__ import annotations


def sum(numbers):
    """Add up every number, starting from 0."""
    total = 0
    for number in numbers:
        total = total + number
    return total


def mul(numbers):
    """Multiply every number together, starting from 1."""
    product = 1
    for number in numbers:
        product = product * number
    return product


def factorial(number: int) -> int:
    """Return ``number!``; ``factorial(0) == 1``.

    Raises:
        ValueError: for negative input.
    """
    if number < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {number}")

    return mul(range(1, number + 1))
