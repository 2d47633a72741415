import pytest

from scaffkit.filenames import SUFFIXES, FileNames


def test_plain_name():
    prefix = "run"
    assert FileNames(prefix).path("contig") == prefix + ".contig"


def test_renamed_suffixes():
    names = FileNames("p")
    assert names.path("pe_pairs") == "p" + ".pe_pair"
    assert names.path("mintreetrunk") == "p" + ".mintree_trunk"


def test_round_zero_is_plain():
    names = FileNames("p")
    assert names.path("seeds", 0) == names.path("seeds")


def test_round_tag():
    names = FileNames("p")
    assert names.path("seeds", 3) == names.path("seeds") + "_round_" + "3"


def test_middle_tag():
    names = FileNames("p")
    assert names.path("gap_oo", "mid") == "p" + "." + "mid" + ".gap_oo"
    assert names.path("gap_oo", "") == names.path("gap_oo")


def test_every_kind_ends_with_its_suffix():
    names = FileNames("p")
    for kind, suffix in SUFFIXES.items():
        assert names.path(kind).endswith(suffix)
        assert names.path(kind).startswith("p")


def test_unknown_kind():
    with pytest.raises(KeyError):
        FileNames("p").path("no_such_kind")


def test_bad_tag_type():
    with pytest.raises(TypeError):
        FileNames("p").path("contig", 1.5)