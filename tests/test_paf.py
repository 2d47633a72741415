import pytest

from scaffkit.align_result import MatchDetail
from scaffkit.paf import PafItem

SAMPLE = (
    "15\t4432\t0\t259\t+\t9125\t13577\t9\t273\t242\t266\t0\t"
    "tp:A:S\tmm:i:15\tgn:i:9\tgo:i:2\tcg:Z:136M7D13M2I108M"
)


def _line(start, end, strand, qlen, qstart, qend):
    return f"read\t10000\t{start}\t{end}\t{strand}\t1\t{qlen}\t{qstart}\t{qend}\t90\t100\t60"


def test_parse_columns():
    item = PafItem.parse(SAMPLE)
    assert item.target_name == "15"
    assert item.target_len == 4432
    assert item.target_start == 0
    assert item.target_end == 259
    assert item.query_char == "+"
    assert item.query_name == "9125"
    assert item.query_len == 13577
    assert item.query_start == 9
    assert item.query_end == 273
    assert item.match_len == 242
    assert item.aligned_len == 266
    assert item.quality == 0


def test_parse_cigar_field():
    item = PafItem.parse(SAMPLE)
    expected = MatchDetail.from_cigar("136M7D13M2I108M")
    assert item.details == expected
    assert len(item.details.infos) == 5


def test_parse_md_field():
    item = PafItem.parse(SAMPLE[: SAMPLE.index("\ttp")] + "\tMD:Z:10A5")
    assert item.md_data.total_same == 15


def test_idy():
    item = PafItem.parse(SAMPLE)
    assert item.idy() == pytest.approx(242 / 266)


def test_too_few_columns():
    with pytest.raises(ValueError):
        PafItem.parse("a\t1\t2\t3\t+")


def test_bad_optional_field():
    with pytest.raises(ValueError):
        PafItem.parse(SAMPLE + "\tbroken")


@pytest.mark.parametrize("strand", ["+", "-"])
def test_flatten_full_length_keeps_target(strand):
    item = PafItem.parse(_line(100, 199, strand, 100, 1, 100))
    flat = item.flatten()
    assert (flat.target_start, flat.target_end) == (100, 199)
    assert flat.query_start == 0
    assert flat.query_end == item.query_len - 1


def test_flatten_extends_target_and_leaves_original():
    item = PafItem.parse(_line(500, 560, "+", 100, 20, 80))
    flat = item.flatten()
    assert flat.target_start < item.target_start
    assert flat.target_end > item.target_end
    assert item.query_start == 20
    assert item.target_start == 500


def test_flatten_reverse_strand_extends_both_ends():
    item = PafItem.parse(_line(500, 560, "-", 100, 20, 80))
    flat = item.flatten()
    assert flat.target_start < item.target_start
    assert flat.target_end > item.target_end