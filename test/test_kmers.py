import pytest

from kmer_count import (
    KmerCount,
    count_kmers,
    is_header,
    is_valid_sequence,
    iter_kmers,
    iter_sequence_lines,
    rank_kmers,
)


def as_pairs(entries):
    return [(entry.kmer, entry.count) for entry in entries]


def test_single_window():
    """A line of exactly four bases yields one k-mer."""
    counts = count_kmers(["ATCG"])
    assert counts == {"ATCG": 1}
    assert as_pairs(rank_kmers(counts)) == [("ATCG", 1)]


def test_two_windows_tie_broken_by_key():
    """Equal counts are ordered lexicographically."""
    counts = count_kmers(["ATCGA"])
    assert counts == {"ATCG": 1, "TCGA": 1}
    assert as_pairs(rank_kmers(counts)) == [("ATCG", 1), ("TCGA", 1)]


def test_repeated_window():
    """Repeated windows accumulate and rank first."""
    counts = count_kmers(["ATCGATCG"])
    assert counts == {"ATCG": 2, "TCGA": 1, "CGAT": 1, "GATC": 1}
    assert as_pairs(rank_kmers(counts)) == [
        ("ATCG", 2),
        ("CGAT", 1),
        ("GATC", 1),
        ("TCGA", 1),
    ]


def test_header_and_short_line(capsys):
    """Headers are skipped silently, short lines with a warning."""
    counts = count_kmers([">header1", "ATC"])
    assert counts == {}
    assert rank_kmers(counts) == []

    err = capsys.readouterr().err
    assert err == "Warning: Line too short to contain any k-mers: ATC\n"


def test_invalid_character(capsys):
    """A line with a character outside the alphabet contributes nothing."""
    assert count_kmers(["ATCN"]) == {}
    err = capsys.readouterr().err
    assert err == "Warning: Invalid DNA sequence found: ATCN\n"


def test_header_content_is_ignored(capsys):
    """Header lines never contribute, whatever follows the marker."""
    assert count_kmers([">ATCGATCG", ">", "", ">xyz not dna"]) == {}
    assert capsys.readouterr().err == ""


def test_lowercase_is_invalid(capsys):
    """Lowercase bases are rejected, not normalized."""
    assert count_kmers(["atcg", "ATCg"]) == {}
    err = capsys.readouterr().err.splitlines()
    assert err == [
        "Warning: Invalid DNA sequence found: atcg",
        "Warning: Invalid DNA sequence found: ATCg",
    ]


def test_invalid_check_precedes_length_check(capsys):
    """A short line with a bad character is reported as invalid."""
    assert count_kmers(["AN"]) == {}
    assert capsys.readouterr().err == "Warning: Invalid DNA sequence found: AN\n"


def test_warnings_follow_input_order(capsys):
    """One warning per offending line, in the order the lines appear."""
    lines = ["ATCGGA", "GG", ">h", "ACGTN", "", "TTTTT", "C", "AXC"]
    counts = count_kmers(lines)
    assert counts == {"ATCG": 1, "TCGG": 1, "CGGA": 1, "TTTT": 2}

    err = capsys.readouterr().err.splitlines()
    assert err == [
        "Warning: Line too short to contain any k-mers: GG",
        "Warning: Invalid DNA sequence found: ACGTN",
        "Warning: Line too short to contain any k-mers: C",
        "Warning: Invalid DNA sequence found: AXC",
    ]


def test_counts_accumulate_across_lines():
    """Windows never span line boundaries."""
    counts = count_kmers(["AAAA", "AAAA", "AAA"])
    assert counts == {"AAAA": 2}


def test_sum_of_counts_matches_window_count():
    """Total count equals the sum of len - 3 over valid lines."""
    lines = [
        ">seq1",
        "ATCGATCGGGCTA",
        "ATC",
        "GATTACA",
        "NNNNNNNN",
        "",
        "CCCCCCCCCCCCCCCC",
        "acgtacgt",
    ]
    counts = count_kmers(lines)
    expected = sum(
        max(0, len(line) - 3)
        for line in lines
        if not is_header(line) and is_valid_sequence(line)
    )
    assert sum(counts.values()) == expected == 10 + 4 + 13


def test_keys_are_kmers_over_alphabet():
    counts = count_kmers(["GATTACAGATTACA", "CCGGTTAA"])
    for kmer in counts:
        assert len(kmer) == 4
        assert set(kmer) <= set("ATCG")


def test_ranking_is_sorted():
    """Adjacent entries are ordered by count, then key."""
    counts = count_kmers(["ACGTACGTTTTTTGCAAAAAACGT", "GGGGGGCCCCCC", "ACGTAC"])
    ranked = rank_kmers(counts)
    assert len(ranked) == len(counts)
    assert {entry.kmer for entry in ranked} == set(counts)
    for a, b in zip(ranked, ranked[1:]):
        assert a.count >= b.count
        if a.count == b.count:
            assert a.kmer < b.kmer


def test_ranking_ignores_input_order():
    """The ranked result depends only on the mapping contents."""
    counts = {"TTTT": 3, "AAAA": 1, "CCCC": 3, "GGGG": 1, "ACGT": 2}
    reversed_counts = dict(reversed(list(counts.items())))
    expected = [("CCCC", 3), ("TTTT", 3), ("ACGT", 2), ("AAAA", 1), ("GGGG", 1)]
    assert as_pairs(rank_kmers(counts)) == expected
    assert as_pairs(rank_kmers(reversed_counts)) == expected


def test_ranked_entries_are_immutable():
    entry = rank_kmers({"ACGT": 1})[0]
    assert entry == KmerCount(kmer="ACGT", count=1)
    with pytest.raises(AttributeError):
        entry.count = 2


def test_iter_kmers():
    assert list(iter_kmers("ACGTA")) == ["ACGT", "CGTA"]
    assert list(iter_kmers("ACGT")) == ["ACGT"]
    assert list(iter_kmers("ACG")) == []


def test_iter_sequence_lines(capsys):
    lines = [">h", "ACGT", "AC", "ACGN", "GGGGG"]
    assert list(iter_sequence_lines(lines)) == ["ACGT", "GGGGG"]
    assert len(capsys.readouterr().err.splitlines()) == 2


def test_is_header():
    assert is_header("") is True
    assert is_header(">") is True
    assert is_header(">chr1 description") is True
    assert is_header("ACGT") is False
    assert is_header(" >ACGT") is False


def test_is_valid_sequence():
    assert is_valid_sequence("ACGT") is True
    assert is_valid_sequence("") is True
    assert is_valid_sequence("ACGU") is False
    assert is_valid_sequence("ACG T") is False
    assert is_valid_sequence("acgt") is False
