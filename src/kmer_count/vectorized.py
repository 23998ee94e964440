from typing import Iterable

import numpy as np

from .kmers import ALPHABET, KMER_LENGTH, iter_sequence_lines

# ---------- Encoding (2 bits per base, base-4 window codes) ----------
_BASE2IDX = np.full(256, -1, dtype=np.int8)
for i, b in enumerate(ALPHABET.encode("ascii")):
    _BASE2IDX[b] = i

_N_CODES = len(ALPHABET) ** KMER_LENGTH
_PLACE_VALUES = len(ALPHABET) ** np.arange(KMER_LENGTH - 1, -1, -1, dtype=np.int64)


def encode_bases(seq: str) -> np.ndarray:
    """Return the alphabet index (0-3) of every base in seq."""
    s = np.frombuffer(seq.encode("ascii"), dtype=np.uint8)
    idx = _BASE2IDX[s]
    if np.any(idx < 0):
        raise ValueError(f"Only {ALPHABET} are allowed: {seq}")
    return idx.astype(np.int64)


def window_codes(seq: str) -> np.ndarray:
    """Return the base-4 code of every overlapping k-mer window of seq."""
    idx = encode_bases(seq)
    n_windows = len(idx) - KMER_LENGTH + 1
    if n_windows <= 0:
        return np.empty(0, dtype=np.int64)
    codes = np.zeros(n_windows, dtype=np.int64)
    for offset, place in enumerate(_PLACE_VALUES):
        codes += idx[offset:offset + n_windows] * place
    return codes


def decode_code(code: int) -> str:
    """Inverse of the window encoding for a single code."""
    bases = []
    for _ in range(KMER_LENGTH):
        code, rem = divmod(code, len(ALPHABET))
        bases.append(ALPHABET[rem])
    return "".join(reversed(bases))


def count_kmers_vectorized(lines: Iterable[str]) -> dict[str, int]:
    """
    Count k-mers like count_kmers, using numpy array arithmetic.

    Line filtering and warnings are shared with the loop implementation.

    :param lines: Input lines without line terminators.
    :returns: Mapping of k-mer to number of occurrences (non-zero entries only).
    """
    totals = np.zeros(_N_CODES, dtype=np.int64)
    for sequence in iter_sequence_lines(lines):
        totals += np.bincount(window_codes(sequence), minlength=_N_CODES)

    return {decode_code(int(code)): int(totals[code]) for code in np.flatnonzero(totals)}
