"""Command line entry point: read arrays from a file and report on them."""

from __future__ import annotations

import argparse
import sys

from arrayops.miscutils import print_arrays, quick_sort, read_arrays_from_file
from arrayops.transformers import Transformation, create_transformer

DEFAULT_INPUT = "input.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arrayops",
        description="Sort, intersect and deduplicate integer arrays read from a file.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"file with one array per line (default: {DEFAULT_INPUT})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run every transformation over the arrays in the input file."""
    args = _build_parser().parse_args(argv)

    try:
        arrays = read_arrays_from_file(args.input)
    except OSError:
        print(f"Could not open file: {args.input}", file=sys.stderr)
        return 1
    except (ValueError, OverflowError) as exc:
        print(f"Could not parse file {args.input}: {exc}", file=sys.stderr)
        return 1

    if len(arrays) < 2:
        print(f"At least two arrays are required, got {len(arrays)}", file=sys.stderr)
        return 1

    print("PrintArrays")
    print_arrays(arrays)
    print()

    create_transformer(Transformation.SORT).transform(arrays)
    create_transformer(Transformation.INTERSECT).transform(arrays)

    quick_sort(arrays, lambda a, b: len(a) > len(b))
    two_longest = [list(arrays[0]), list(arrays[1])]
    create_transformer(Transformation.INTERSECT).transform(two_longest)

    create_transformer(Transformation.UNIQUE_REVERSE_SORTED).transform(arrays)
    return 0


if __name__ == "__main__":
    sys.exit(main())