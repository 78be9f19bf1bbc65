import pytest

from mastermind.classifier import NO_CLASS, classify, declassify, total_classes
from mastermind.errors import InvalidResultClass


@pytest.mark.parametrize("pair,expected", [
    ((0, 0), 0),
    ((0, 4), 4),
    ((1, 0), 5),
    ((1, 3), 8),
    ((2, 0), 9),
    ((2, 2), 11),
    ((3, 0), 12),
    ((3, 1), 13),
    ((4, 0), 14),
])
def test_classify_four_slots(pair, expected):
    assert classify(*pair) == expected


def test_total_classes():
    assert total_classes(4) == 15
    assert total_classes(1) == 3
    assert total_classes(5) == 21


@pytest.mark.parametrize("pair", [(1, 4), (2, 3), (3, 2), (4, 1), (5, 0), (-1, 0), (0, -1)])
def test_classify_infeasible_pairs(pair):
    assert classify(*pair) == NO_CLASS


@pytest.mark.parametrize("slot_count", [1, 2, 3, 4, 5, 6])
def test_classify_is_dense_and_reversible(slot_count):
    seen = []
    for exact in range(slot_count + 1):
        for color_only in range(slot_count + 1):
            result_class = classify(exact, color_only, slot_count)
            if exact + color_only > slot_count:
                assert result_class == NO_CLASS
                continue
            assert declassify(result_class, slot_count) == (exact, color_only)
            seen.append(result_class)

    # Visiting order hands out 0, 1, 2, ... with no gaps
    assert seen == list(range(total_classes(slot_count)))


@pytest.mark.parametrize("class_id", [-1, 15, 100])
def test_declassify_out_of_range(class_id):
    with pytest.raises(InvalidResultClass):
        declassify(class_id)
