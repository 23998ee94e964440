import argparse
import sys
from typing import Sequence

from .cmd import run_count


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="kmer_count",
        description="Count overlapping 4-mers in a DNA sequence file",
    )
    parser.add_argument("input", help="Input file with one sequence per line")
    parser.add_argument("output", help="Output TSV of k-mers and counts")
    parser.set_defaults(func=run_count)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (OSError, ValueError, RuntimeError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
