from __future__ import annotations

import argparse
import importlib
import json
import sys
import time

from linsort._engine import ObligationResult, check_sorter
from linsort._errors import LinsortError, UnknownSorterError
from linsort._range import full_range
from linsort._sorter import available_sorters, get_sorter
from linsort._term import force_color, paint, status_label


def _print_result_line(r: ObligationResult, *, verbose: bool = False) -> None:
    # Pad the raw status, then colorize, so ANSI codes don't break alignment
    pad = " " * (5 - len(r.status))
    timing = "  " + paint(f"({r.duration_s:.1f}s)", "muted") if r.duration_s >= 0.05 else ""
    print(f"  {pad}{status_label(r.status)}  {r.obligation:<20}  {paint(r.function, 'strong')}{timing}")

    if not verbose or r.status == "pass":
        return
    ce = r.details.get("counterexample")
    if ce:
        print(f"         input:    {ce['sequence']}  left={ce['left']} right={ce['right']}")
        if "result" in ce:
            print(f"         result:   {ce['result']}")
        if "expected" in ce:
            print(f"         expected: {ce['expected']}")
        if "tags" in ce:
            print(f"         tags:     {ce['tags']}")
    if "error" in r.details:
        print(f"         error:    {r.details['error']}")


def _print_summary(results: list[ObligationResult], total_s: float) -> None:
    passed = sum(1 for r in results if r.status == "pass")
    failed = sum(1 for r in results if r.status in ("fail", "error"))

    parts: list[str] = []
    if passed:
        parts.append(paint(f"{passed} passed", "ok"))
    if failed:
        parts.append(paint(f"{failed} failed", "bad"))
    summary = ", ".join(parts) if parts else "no obligations"
    print(f"\n{summary}  {paint(f'({total_s:.1f}s total)', 'muted')}")


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _read_values(raw: list[str]) -> list[int]:
    if raw == ["-"]:
        raw = sys.stdin.read().split()
    return [int(v) for v in raw]


def _cmd_sort(args: argparse.Namespace) -> int:
    try:
        values = _read_values(args.values)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    left, right = full_range(values)
    left = args.left if args.left is not None else left
    right = args.right if args.right is not None else right

    try:
        get_sorter(args.sorter).sort(values, left, right)
    except (LinsortError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(values))
    else:
        print(" ".join(str(v) for v in values))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    if args.no_color:
        force_color(False)

    for module in args.imports:
        try:
            importlib.import_module(module)
        except ImportError as e:
            print(f"error: could not import module '{module}': {e}", file=sys.stderr)
            return 1

    json_mode = args.json

    def on_result(r: ObligationResult) -> None:
        if not json_mode and not args.quiet:
            _print_result_line(r, verbose=args.verbose)

    t_start = time.monotonic()
    try:
        results = check_sorter(
            args.sorter,
            max_examples=args.max_examples,
            max_list_size=args.max_list_size,
            on_result=on_result,
            out_dir=args.out,
        )
    except (UnknownSorterError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    total_s = time.monotonic() - t_start

    if json_mode:
        print(json.dumps([r.to_json() for r in results], indent=2, default=str))
    else:
        _print_summary(results, total_s)
        if args.out:
            print(paint(f"JSON report in {args.out}/", "muted"))

    return 1 if any(r.status in ("fail", "error") for r in results) else 0


def _cmd_list(args: argparse.Namespace) -> int:
    for name in available_sorters():
        print(name)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="linsort", description="Range sorting with an extended counting sort.")
    sub = p.add_subparsers(dest="command", required=True)

    ps = sub.add_parser("sort", help="Sort integers given as arguments (or '-' for stdin)")
    ps.add_argument("values", nargs="+", help="Integers to sort, or '-' to read them from stdin")
    ps.add_argument("--left", type=int, default=None, help="First index of the range (default: 0)")
    ps.add_argument("--right", type=int, default=None, help="Last index of the range, inclusive (default: last)")
    ps.add_argument("--sorter", default="extended-counting", help="Registered sorter to use")
    ps.add_argument("--json", action="store_true", help="Print the result as a JSON array")
    ps.set_defaults(func=_cmd_sort)

    pc = sub.add_parser("check", help="Property-check a registered sorter")
    pc.add_argument("sorter", nargs="?", default="extended-counting", help="Registered sorter name")
    pc.add_argument("--import", dest="imports", action="append", default=[],
                    help="Module to import first, e.g. one that registers extra sorters (repeatable)")
    pc.add_argument("--max-examples", type=_positive_int, default=200, help="Examples per obligation")
    pc.add_argument("--max-list-size", type=_positive_int, default=20, help="Max size of generated sequences")
    pc.add_argument("--out", default=None, help="Directory for the JSON report")
    pc.add_argument("-v", "--verbose", action="store_true", help="Show counterexample details")
    pc.add_argument("-q", "--quiet", action="store_true", help="Only print the summary and exit code")
    pc.add_argument("--json", action="store_true", help="Output results as JSON array to stdout")
    pc.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    pc.set_defaults(func=_cmd_check)

    pl = sub.add_parser("list", help="List registered sorters")
    pl.set_defaults(func=_cmd_list)

    args = p.parse_args(argv)
    return int(args.func(args))
