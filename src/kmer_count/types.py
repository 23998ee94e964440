from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KmerCount:
    """A k-mer and the number of times it was observed."""
    kmer: str
    count: int
