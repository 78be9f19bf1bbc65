"""
Dense numbering of score outcomes.

A UI usually keeps one picture per possible (exact, color_only) outcome. These
helpers give every feasible pair a single index so the picture can be looked
up directly. Numbering walks exact from 0 to slot_count (outer) and color_only
from 0 to slot_count (inner), skipping pairs that add up to more than
slot_count. With 4 slots:

    (0,0)->0 ... (0,4)->4, (1,0)->5 ... (1,3)->8,
    (2,0)->9 ... (2,2)->11, (3,0)->12, (3,1)->13, (4,0)->14
"""

from typing import Tuple

from .config import DEFAULT_SLOT_COUNT
from .errors import InvalidResultClass

NO_CLASS = -1


def total_classes(slot_count: int = DEFAULT_SLOT_COUNT) -> int:
    return (slot_count + 1) * (slot_count + 2) // 2


def _row_start(exact: int, slot_count: int) -> int:
    # Row `exact` holds slot_count + 1 - exact pairs
    return exact * (slot_count + 1) - exact * (exact - 1) // 2


def classify(exact: int, color_only: int, slot_count: int = DEFAULT_SLOT_COUNT) -> int:
    """Class index for (exact, color_only), or NO_CLASS if the pair cannot happen."""
    if exact < 0 or color_only < 0 or exact + color_only > slot_count:
        return NO_CLASS
    return _row_start(exact, slot_count) + color_only


def declassify(class_id: int, slot_count: int = DEFAULT_SLOT_COUNT) -> Tuple[int, int]:
    """Inverse of classify(). Raises InvalidResultClass outside [0, total_classes)."""
    if class_id < 0 or class_id >= total_classes(slot_count):
        raise InvalidResultClass(
            f"Result class must be between 0 and {total_classes(slot_count) - 1}, got {class_id}."
        )

    exact = 0
    while class_id >= _row_start(exact + 1, slot_count):
        exact += 1
    return (exact, class_id - _row_start(exact, slot_count))
