import argparse
import time
from pathlib import Path

from .io import check_input_file, read_lines, write_kmer_table
from .kmers import count_kmers, rank_kmers


def run_count(args: argparse.Namespace) -> None:
    """Count k-mers in a sequence file and write the ranked frequency table."""
    start = time.time()
    input_path = Path(args.input)
    output_path = Path(args.output)

    check_input_file(input_path)
    lines = read_lines(input_path)
    counts = count_kmers(lines)
    ranked = rank_kmers(counts)
    write_kmer_table(ranked, output_path)

    print(
        f"Counted {sum(counts.values()):,} k-mer occurrences "
        f"({len(ranked):,} unique) from {len(lines):,} lines."
    )
    print(f"Wrote k-mer table to {output_path}")
    print(f"Time elapsed: {time.time() - start:.2g} seconds")
