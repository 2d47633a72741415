from scaffkit.contig_pair import OOType, PairPN
from scaffkit.ont2gap import (
    ONT2GapInfo,
    sort_match_score_more,
    sort_median,
    sort_modify_less,
    sort_less,
    sort_more,
)
from scaffkit.paf import PafItem


def _info(gap, match_len=90, aligned_len=100):
    return ONT2GapInfo(
        PafItem(match_len=match_len, aligned_len=aligned_len),
        PafItem(match_len=match_len, aligned_len=aligned_len),
        PairPN(1, 2, OOType.C1_2_C2, gap),
    )


def _gaps(data):
    return [info.pair_info.gap_size for info in data]


GAPS = [10, -5, 3, 100, 7, -40]


def test_sort_more():
    data = [_info(g) for g in GAPS]
    sort_more(data)
    assert _gaps(data) == sorted(GAPS, reverse=True)


def test_sort_less():
    data = [_info(g) for g in GAPS]
    sort_less(data)
    assert _gaps(data) == sorted(GAPS)


def test_sort_median_puts_median_first():
    gaps = [10, -5, 3, 100, 7]
    data = [_info(g) for g in gaps]
    sort_median(data)
    assert _gaps(data)[0] == 7
    distances = [abs(g - 7) for g in _gaps(data)]
    assert distances == sorted(distances)
    assert sorted(_gaps(data)) == sorted(gaps)


def test_sort_median_leaves_two_alone():
    data = [_info(50), _info(-50)]
    sort_median(data)
    assert _gaps(data) == [50, -50]


def test_sort_modify_less():
    data = [_info(g) for g in [-3, 3, 1, -1, 5]]
    sort_modify_less(data)
    assert _gaps(data) == [-1, 1, -3, 3, 5]


def test_sort_modify_less_order_invariant():
    data = [_info(g) for g in GAPS]
    sort_modify_less(data)
    keys = [(abs(g), g) for g in _gaps(data)]
    assert keys == sorted(keys)


def test_sort_match_score_more_prefers_identity():
    data = [_info(0, match_len=m) for m in (50, 95, 70, 80)]
    sort_match_score_more(data, 100)
    assert [info.from_.match_len for info in data] == [95, 80, 70, 50]


def test_sort_match_score_more_prefers_longer_alignment():
    data = [_info(0, match_len=a, aligned_len=a) for a in (200, 900, 500)]
    sort_match_score_more(data, 1000, 1.0, 1.0)
    assert [info.from_.aligned_len for info in data] == [900, 500, 200]


def test_sort_match_score_zero_match_goes_last():
    data = [_info(0, match_len=0), _info(1, match_len=60)]
    sort_match_score_more(data, 100)
    assert _gaps(data) == [1, 0]