"""
Command-line interface for seqkit
"""

import argparse
import sys

from pydantic import ValidationError

from seqkit.config import VERSION, get_default_config
from seqkit.events import EventEmitter, EventType, emit
from seqkit.models import SequenceRequest
from seqkit.render import format_sequence
from seqkit.samples import SAMPLES, run_sample
from seqkit.sequence_utils import contains, remove_duplicates, size, sort
from seqkit.sort_profile import CASES, growth_exponents, profile_sort

EXIT_OK = 0
EXIT_INVALID = 2

EVENTS_HELP = "Print collected events as JSON lines on stderr"


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(prog="seqkit", description="seqkit - sequence teaching samples")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--events", action="store_true", default=None, help=EVENTS_HELP)

    # SUPPRESS keeps a subcommand from resetting a top-level --events
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--events", action="store_true", default=argparse.SUPPRESS, help=EVENTS_HELP)

    sub = parser.add_subparsers(dest="command", required=True)

    samples = sub.add_parser("samples", parents=[common], help="Run the built-in sample programs")
    samples.add_argument("names", nargs="*", help=f"Samples to run (default: all of {', '.join(SAMPLES)})")

    for name, help_text in (
        ("sort", "Insertion-sort the items"),
        ("dedup", "Remove duplicate items, keeping first occurrences"),
        ("size", "Count the items"),
    ):
        cmd = sub.add_parser(name, parents=[common], help=help_text)
        cmd.add_argument("items", nargs="+")
        cmd.add_argument("--strings", action="store_true", help="Treat items as text, not integers")

    contains_cmd = sub.add_parser("contains", parents=[common], help="Check whether NEEDLE is among the items")
    contains_cmd.add_argument("needle")
    contains_cmd.add_argument("items", nargs="*")
    contains_cmd.add_argument("--strings", action="store_true", help="Treat items as text, not integers")

    profile = sub.add_parser(
        "profile", parents=[common],
        help="Count comparisons and shifts of insertion sort on best, random and worst-case input",
    )
    profile.add_argument("--sizes", type=int, nargs="+", default=None, help="Input sizes to profile")
    profile.add_argument("--cases", nargs="+", choices=CASES, default=None, help="Input layouts to profile")
    profile.add_argument("--iterations", "-i", type=int, default=None, help="Timed runs per input")

    return parser.parse_args(argv)


def _request(items, as_strings) -> list:
    return SequenceRequest(items=items, as_strings=as_strings).items


def _run_samples(args, emitter, out):
    names = args.names or list(SAMPLES)
    for name in names:
        result = run_sample(name, emitter=emitter)
        print(f"== {name}", file=out)
        print(result.text, file=out)


def _run_sequence_command(args, emitter, out):
    items = _request(args.items, args.strings)

    if args.command == "sort":
        sort(items)
        print(format_sequence(items), file=out)
    elif args.command == "dedup":
        items = remove_duplicates(items)
        print(format_sequence(items), file=out)
    elif args.command == "size":
        print(size(items), file=out)
    elif args.command == "contains":
        needle = _request([args.needle], args.strings)[0]
        print("true" if contains(items, needle) else "false", file=out)

    emitter.complete(EventType.COMMAND_COMPLETE, "cli", f"{args.command} done", data={"size": size(items)})


def _run_profile(args, emitter, out, config):
    cases = args.cases or list(CASES)
    profiles = profile_sort(
        input_sizes=config["input_sizes"] if args.sizes is None else args.sizes,
        cases=cases,
        iterations=config["iterations"] if args.iterations is None else args.iterations,
        seed=config["seed"],
        emitter=emitter,
    )

    print(f"{'case':<9}{'n':>7}{'comparisons':>13}{'shifts':>10}{'time ms':>11}{'peak KiB':>10}", file=out)
    for p in profiles:
        print(
            f"{p.case:<9}{p.input_size:>7}{p.comparisons:>13}{p.shifts:>10}"
            f"{p.time_ms:>11.3f}{p.memory_kb:>10.3f}",
            file=out,
        )

    for case in cases:
        exponents = growth_exponents(profiles, case)
        if exponents:
            print(f"{case}: comparisons grow as n^k, k = {', '.join(str(k) for k in exponents)}", file=out)

    emitter.complete(EventType.COMMAND_COMPLETE, "cli", "profile done", data={"runs": len(profiles)})


def main(argv=None, out=None, err=None) -> int:
    """Main entry point"""
    out = out or sys.stdout
    err = err or sys.stderr
    args = parse_args(argv)

    try:
        config = get_default_config()
    except ValueError as e:
        emit("cli", f"invalid configuration: {e}", stream=err)
        return EXIT_INVALID

    show_events = config["emit_events"] if args.events is None else args.events
    emitter = EventEmitter()
    if show_events:
        emitter.on_event(lambda event: print(event.to_json(), file=err))

    try:
        if args.command == "samples":
            _run_samples(args, emitter, out)
        elif args.command == "profile":
            _run_profile(args, emitter, out, config)
        else:
            _run_sequence_command(args, emitter, out)
    except ValidationError as e:
        emitter.error("cli", "invalid items", data={"errors": e.error_count()})
        print(f"error: {e}", file=err)
        return EXIT_INVALID
    except KeyError as e:
        emitter.error("cli", e.args[0])
        print(f"error: {e.args[0]}", file=err)
        return EXIT_INVALID
    except ValueError as e:
        emitter.error("cli", str(e))
        print(f"error: {e}", file=err)
        return EXIT_INVALID

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
