import csv
from pathlib import Path
from typing import Sequence

from .types import KmerCount

# Every byte decodes, so stray bytes only make their line invalid.
INPUT_ENCODING = "latin-1"


def check_input_file(path: Path) -> None:
    """Raise if path is not an existing, non-empty file."""
    if not path.is_file():
        raise FileNotFoundError(f"Error: File '{path}' not found")
    if path.stat().st_size == 0:
        raise ValueError(f"Error: File '{path}' is empty")


class SequenceLineReader:
    """
    A simple line reader that yields the lines of a sequence file.

    Lines are split on LF only and the LF is removed; a carriage return stays
    in its line. Headers and invalid lines are passed through unchanged so that
    the counter can report on them.
    """
    def __init__(self, path: Path):
        self.path = path

    def __iter__(self):
        with open(self.path, 'r', encoding=INPUT_ENCODING, newline='\n') as f:
            for line in f:
                yield line.rstrip('\n')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        pass


def read_lines(path: Path) -> list[str]:
    """Read all lines of the input file into memory."""
    try:
        with SequenceLineReader(path) as reader:
            return list(reader)
    except OSError as exc:
        raise RuntimeError(
            f"Error: An error occurred while reading the input file '{path}'"
        ) from exc


def write_kmer_table(entries: Sequence[KmerCount], output_path: Path) -> None:
    """Write one tab-separated `kmer, count` row per entry, without a header."""
    try:
        handle = output_path.open("w", newline="", encoding="ascii")
    except OSError as exc:
        raise RuntimeError(
            f"Error: Unable to open output file '{output_path}'"
        ) from exc

    try:
        with handle:
            writer = csv.writer(handle, delimiter="\t", lineterminator="\n")
            for record in entries:
                writer.writerow([record.kmer, str(record.count)])
    except OSError as exc:
        raise RuntimeError(
            f"Error: An error occurred while writing to the output file '{output_path}'"
        ) from exc
