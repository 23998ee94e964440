import sys
from typing import Iterable, Iterator, Mapping

from .types import KmerCount

KMER_LENGTH = 4
ALPHABET = "ATCG"
HEADER_MARKER = ">"

_ALPHABET_SET = frozenset(ALPHABET)


def is_header(line: str) -> bool:
    """Return True for blank lines and lines starting with the header marker."""
    return not line or line[0] == HEADER_MARKER


def is_valid_sequence(seq: str) -> bool:
    """
    Check if sequence contains only valid nucleotides (A, T, C, G).

    Lowercase letters are not accepted.

    :param seq: The sequence to check.
    :returns: True if sequence contains only A, T, C, G.
    """
    return all(c in _ALPHABET_SET for c in seq)


def iter_sequence_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield the lines that contribute k-mers, in input order.

    Headers and blank lines are skipped silently. Lines with characters
    outside the alphabet, or too short to hold a single k-mer, are skipped
    with a warning on stderr.
    """
    for line in lines:
        if is_header(line):
            continue
        if not is_valid_sequence(line):
            print(f"Warning: Invalid DNA sequence found: {line}", file=sys.stderr)
            continue
        if len(line) < KMER_LENGTH:
            print(
                f"Warning: Line too short to contain any k-mers: {line}",
                file=sys.stderr,
            )
            continue
        yield line


def iter_kmers(sequence: str) -> Iterator[str]:
    """Yield all overlapping windows of length KMER_LENGTH."""
    for start in range(len(sequence) - KMER_LENGTH + 1):
        yield sequence[start:start + KMER_LENGTH]


def count_kmers(lines: Iterable[str]) -> dict[str, int]:
    """
    Count overlapping k-mers over all valid sequence lines.

    :param lines: Input lines without line terminators.
    :returns: Mapping of k-mer to number of occurrences.
    """
    counts = {}
    for sequence in iter_sequence_lines(lines):
        for kmer in iter_kmers(sequence):
            counts[kmer] = counts.get(kmer, 0) + 1
    return counts


def rank_kmers(counts: Mapping[str, int]) -> list[KmerCount]:
    """Order k-mers by count (descending), ties broken by k-mer (ascending)."""
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [KmerCount(kmer=kmer, count=count) for kmer, count in ordered]
