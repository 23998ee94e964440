"""Validate agreement between the loop and the vectorized k-mer counters.

This script counts the k-mers of a sequence file with both implementations and
reports:
- whether the two frequency tables are identical,
- the k-mers whose counts differ (if any), and
- the fraction of all k-mer occurrences covered by the top N k-mers.

With ``--plot`` the ranked counts and their cumulative distribution are shown
with matplotlib.
"""
import argparse
import time
from pathlib import Path

import numpy as np

from kmer_count import (
    check_input_file,
    count_kmers,
    count_kmers_vectorized,
    rank_kmers,
    read_lines,
)


def compare_counts(
    counts_a: dict[str, int],
    counts_b: dict[str, int],
) -> list[tuple[str, int, int]]:
    """Return (kmer, count_a, count_b) for every k-mer whose counts differ."""
    differences = []
    for kmer in sorted(set(counts_a) | set(counts_b)):
        a = counts_a.get(kmer, 0)
        b = counts_b.get(kmer, 0)
        if a != b:
            differences.append((kmer, a, b))
    return differences


def compute_cdf(counts: dict[str, int]) -> np.ndarray:
    """Cumulative fraction of occurrences covered by the top N k-mers."""
    ranked = np.array([record.count for record in rank_kmers(counts)], dtype=np.int64)
    if ranked.size == 0:
        return np.empty(0, dtype=float)
    return np.cumsum(ranked) / np.sum(ranked)


def format_report(cdf: np.ndarray) -> str:
    """Format the coverage report for stdout."""
    lines = []
    for top_n in (1, 4, 16, 64, 256):
        if top_n > len(cdf):
            break
        lines.append(f"Top {top_n:>3}: {cdf[top_n - 1] * 100:>6.2f}% of occurrences")
    return "\n".join(lines)


def plot_distribution(counts: dict[str, int], cdf: np.ndarray) -> None:
    """Plot ranked k-mer counts and their cumulative distribution."""
    import matplotlib.pyplot as plt

    ranked = rank_kmers(counts)
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))
    fig.suptitle("K-mer Frequency Distribution", fontsize=16)

    # Left plot: ranked counts
    ax1.plot([record.count for record in ranked], color="tab:blue")
    ax1.set_xlabel("Rank")
    ax1.set_ylabel("Count")
    ax1.grid(True, which="both", linestyle="--", linewidth=0.5)

    # Right plot: cumulative distribution
    ax2.plot(cdf, color="tab:green")
    ax2.set_xscale("log")
    ax2.set_xlabel("Top N k-mers")
    ax2.set_ylabel("Cumulative fraction of occurrences")
    ax2.grid(True, which="both", linestyle="--", linewidth=0.5)

    plt.tight_layout()
    plt.show()


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Validate k-mer counter agreement")
    parser.add_argument("input", type=Path, help="Sequence file to count")
    parser.add_argument("--plot", action="store_true", help="Plot the count distribution")
    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    args = parse_args()
    check_input_file(args.input)
    lines = read_lines(args.input)

    start = time.time()
    counts_loop = count_kmers(lines)
    print(f"Loop counter: {len(counts_loop):,} k-mers in {time.time() - start:.2g} seconds")

    start = time.time()
    counts_vec = count_kmers_vectorized(lines)
    print(f"Vectorized counter: {len(counts_vec):,} k-mers in {time.time() - start:.2g} seconds")

    differences = compare_counts(counts_loop, counts_vec)
    if differences:
        print(f"{len(differences):,} k-mers differ:")
        for kmer, a, b in differences:
            print(f"  {kmer}: loop={a} vectorized={b}")
    else:
        print("Counters agree.")

    cdf = compute_cdf(counts_loop)
    print(format_report(cdf))
    if args.plot:
        plot_distribution(counts_loop, cdf)


if __name__ == "__main__":
    main()
