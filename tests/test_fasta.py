import io

import pytest

from scaffkit.fasta import (
    FastaFormatError,
    GapType,
    IdDescHead,
    NormalHead,
    ScaffSplitGapHead,
    SOAP2ContigHead,
    is_head,
    iter_fasta,
    read_all_fasta,
)

INPUT = (
    ">3 length 64 cvg_0.0_tip_0\n"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAATTAGCCAAGCGTG\n"
    "AGTCAA\n"
    ">5 length 64 cvg_0.0_tip_1\n"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAATTTGTCAGGCCCAGT\n"
    "AGTCATT\n"
    ">7 length 64 cvg_0.0_tip_0\n"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAGTAGATGGGGCCTCAG\n"
    "AGTCATTC\n"
    ">9 length 64 cvg_0.0_tip_0\n"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAGGAGGGAGGTGGGGGAGAA\n"
    "AGTCATTCA\n"
    ">11 length 64 cvg_0.0_tip_0\n"
    "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAATCAGCTGGGCATGGTGGCGC\n"
    "AGTCATTCAA\n"
)


def test_load_next_soap2():
    records = list(iter_fasta(io.StringIO(INPUT), SOAP2ContigHead))
    assert len(records) == 5
    for number, record in enumerate(records, start=1):
        assert record.head.contig_id == number * 2 + 1
        assert len(record.seq) == 69 + number


def test_load_next_normal():
    records = list(iter_fasta(io.StringIO(INPUT), NormalHead))
    assert [len(record.seq) for record in records] == [70, 71, 72, 73, 74]


def test_load_all_soap2():
    records = read_all_fasta(io.StringIO(INPUT), SOAP2ContigHead)
    assert [len(record.seq) for record in records] == [70, 71, 72, 73, 74]
    assert records[1].head.is_tip == 1


def test_load_all_normal():
    records = read_all_fasta(io.StringIO(INPUT))
    assert [len(record.seq) for record in records] == [70, 71, 72, 73, 74]
    assert records[0].head.head() == ">3 length 64 cvg_0.0_tip_0"


def test_soap2_head_text():
    head = SOAP2ContigHead.parse(">21 length 64 cvg_0.0_tip_0")
    assert (head.contig_id, head.length, head.cov, head.is_tip) == (21, 64, 0.0, 0)
    assert head.head() == ">21 length 64 cvg_0_tip_0"
    assert SOAP2ContigHead.parse(">2 length 5 cvg_1.5_tip_1").head() == ">2 length 5 cvg_1.5_tip_1"


def test_soap2_head_invalid():
    with pytest.raises(FastaFormatError):
        SOAP2ContigHead.parse(">contig_one")


def test_id_desc_head():
    head = IdDescHead.parse(">read1 some desc")
    assert head.id == "read1"
    assert head.desc == " some desc"
    assert head.head() == ">read1 some desc"
    assert IdDescHead.parse(">abc") == IdDescHead("abc", "")


def test_id_desc_head_invalid():
    with pytest.raises(FastaFormatError):
        IdDescHead.parse(">")


def test_scaff_split_gap_head_round_trip():
    line = ">12_3\t100\t200\t101\t201\t2"
    head = ScaffSplitGapHead.parse(line)
    assert head.scaff_id == 12
    assert head.gap_index == 3
    assert head.next_contig == 201
    assert head.gap_type is GapType.PE_TRUNK
    assert head.head() == line


def test_scaff_split_gap_head_bad_type():
    with pytest.raises(FastaFormatError):
        ScaffSplitGapHead.parse(">1_1\t1\t2\t3\t4\t9")


def test_is_head():
    assert is_head(">x") is True
    assert is_head("ACGT") is False
    assert is_head("") is False


def test_read_all_rejects_leading_sequence():
    with pytest.raises(FastaFormatError):
        read_all_fasta(io.StringIO("ACGT\n>a\nAC\n"))


def test_iter_skips_leading_sequence():
    records = list(iter_fasta(io.StringIO("junk\n>a\nAC\n")))
    assert [(r.head.head(), r.seq.atcgs) for r in records] == [(">a", "AC")]


def test_header_without_sequence():
    text = ">a\n>b\nACGT\n"
    assert list(iter_fasta(io.StringIO(text))) == []
    records = read_all_fasta(io.StringIO(text))
    assert [(r.head.head(), r.seq.atcgs) for r in records] == [(">b", "ACGT")]


def test_unterminated_last_line_dropped():
    records = read_all_fasta(io.StringIO(">a\nAC\nGT"))
    assert records[0].seq.atcgs == "AC"