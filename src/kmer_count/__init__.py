from .io import check_input_file, read_lines, write_kmer_table
from .kmers import (
    ALPHABET,
    HEADER_MARKER,
    KMER_LENGTH,
    count_kmers,
    is_header,
    is_valid_sequence,
    iter_kmers,
    iter_sequence_lines,
    rank_kmers,
)
from .types import KmerCount
from .vectorized import count_kmers_vectorized

__all__ = [
    "ALPHABET",
    "HEADER_MARKER",
    "KMER_LENGTH",
    "KmerCount",
    "check_input_file",
    "count_kmers",
    "count_kmers_vectorized",
    "is_header",
    "is_valid_sequence",
    "iter_kmers",
    "iter_sequence_lines",
    "rank_kmers",
    "read_lines",
    "write_kmer_table",
]
