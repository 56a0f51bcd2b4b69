from __future__ import annotations

import pytest

from dna_report.featurizer import analyze, normalize, strip_header


def test_normalize_strips_header_whitespace_and_symbols() -> None:
    assert normalize(">seq1\nACGT acgt\nNNXY") == "ACGTACGT"


def test_normalize_header_bases_do_not_leak() -> None:
    assert normalize(">ACGT GATTACA\nTTTT") == "TTTT"


def test_normalize_header_without_newline_is_dropped() -> None:
    assert normalize(">ACGT") == ""


def test_normalize_only_leading_marker_is_a_header() -> None:
    assert normalize("AC>GT\nGG") == "ACGTGG"
    assert normalize("AAAA\n>CCCC\nGG") == "AAAACCCCGG"


def test_normalize_handles_crlf_and_tabs() -> None:
    assert normalize(">id\r\nac\tg\r\nt ") == "ACGT"


@pytest.mark.parametrize("raw", ["", "zzz123", "   \n\t", ">only header\n"])
def test_normalize_degenerate_inputs(raw: str) -> None:
    assert normalize(raw) == ""


def test_normalize_output_alphabet_and_idempotence() -> None:
    seq = normalize("xxGATTACA\nuuNNcgtaRY>@!")
    assert set(seq) <= set("ACGT")
    assert normalize(seq) == seq


def test_strip_header_leaves_body() -> None:
    assert strip_header(">h1 desc\nACGT\n") == "\nACGT\n"
    assert strip_header("ACGT") == "ACGT"


def test_analyze_balanced_sequence() -> None:
    stats = analyze("ACGTACGT")
    assert stats.length == 8
    assert stats.gc_count == 4
    assert stats.at_count == 4
    assert stats.other_count == 0
    assert stats.gc_percent == 50.0
    assert stats.base_counts == {"A": 2, "C": 2, "G": 2, "T": 2}


def test_analyze_empty_sequence() -> None:
    stats = analyze("")
    assert stats.length == 0
    assert stats.gc_count == stats.at_count == stats.other_count == 0
    assert stats.gc_percent == 0.0


def test_analyze_is_not_rounded() -> None:
    stats = analyze("GAA")
    assert stats.gc_percent == pytest.approx(100.0 / 3)


def test_analyze_counts_other_symbols_on_unfiltered_input() -> None:
    stats = analyze("GCNNat")
    assert stats.gc_count == 2
    assert stats.at_count == 0
    assert stats.other_count == 4
    assert stats.gc_count + stats.at_count + stats.other_count == stats.length


def test_as_row_flattens_base_counts() -> None:
    row = analyze("GGCA").as_row()
    assert row == {
        "length": 4,
        "gc_percent": 75.0,
        "gc_count": 3,
        "at_count": 1,
        "other_count": 0,
        "count_A": 1,
        "count_C": 1,
        "count_G": 2,
        "count_T": 0,
    }


def test_header_after_leading_blank_line_is_sequence_body() -> None:
    assert strip_header("\n>seq1 GATTACA\nTT") == "\n>seq1 GATTACA\nTT"
    assert normalize("\n>seq1 GATTACA\nTT") == "GATTACATT"
