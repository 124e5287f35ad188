"""Configuration constants for seqkit."""

import os

# Version
VERSION = "0.1.0"

# Rendering
INDENT = "  "

# Sort profiling settings
DEFAULT_INPUT_SIZES = [100, 200, 400, 800]
DEFAULT_ITERATIONS = 5
RANDOM_SEED = 42

# Environment overrides
ENV_ITERATIONS = "SEQKIT_PROFILE_ITERATIONS"
ENV_SIZES = "SEQKIT_PROFILE_SIZES"
ENV_EMIT_EVENTS = "SEQKIT_EMIT_EVENTS"

TRUTHY = {"1", "true", "yes", "on"}


def get_default_config():
    """Return default configuration dict, with environment overrides applied.

    Raises:
        ValueError: if an override is not a valid integer (list).
    """
    iterations = DEFAULT_ITERATIONS
    raw_iterations = os.environ.get(ENV_ITERATIONS)
    if raw_iterations:
        iterations = int(raw_iterations)
        if iterations < 1:
            raise ValueError(f"{ENV_ITERATIONS} must be >= 1, got {iterations}")

    input_sizes = list(DEFAULT_INPUT_SIZES)
    raw_sizes = os.environ.get(ENV_SIZES)
    if raw_sizes:
        input_sizes = [int(part) for part in raw_sizes.split(",") if part.strip()]

    emit_events = os.environ.get(ENV_EMIT_EVENTS, "").strip().lower() in TRUTHY

    return {
        "iterations": iterations,
        "input_sizes": input_sizes,
        "seed": RANDOM_SEED,
        "emit_events": emit_events,
    }
