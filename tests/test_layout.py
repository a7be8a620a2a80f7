import pytest

from onaroll.tui.layout import Rect, centered_rect, split_horizontal, split_vertical


def test_centered_rect():
    assert centered_rect(50, 50, Rect(0, 0, 100, 100)) == Rect(25, 25, 50, 50)


def test_centered_rect_with_offset_area():
    assert centered_rect(60, 20, Rect(10, 5, 100, 50)) == Rect(30, 25, 60, 10)


def test_centered_rect_full_size():
    area = Rect(3, 4, 40, 20)
    assert centered_rect(100, 100, area) == area


def test_centered_rect_stays_inside():
    area = Rect(2, 1, 37, 23)
    rect = centered_rect(33, 71, area)
    assert area.x <= rect.x and rect.right <= area.right
    assert area.y <= rect.y and rect.bottom <= area.bottom


@pytest.mark.parametrize("percent", [-1, 101])
def test_centered_rect_rejects_bad_percentage(percent):
    with pytest.raises(ValueError):
        centered_rect(percent, 50, Rect(0, 0, 10, 10))


def test_inner_shrinks_every_side():
    assert Rect(0, 0, 80, 24).inner(1) == Rect(1, 1, 78, 22)


def test_inner_too_small_is_empty():
    assert Rect(5, 5, 1, 10).inner(1) == Rect(0, 0, 0, 0)


def test_inner_rejects_negative_margin():
    with pytest.raises(ValueError):
        Rect(0, 0, 10, 10).inner(-1)


def test_split_horizontal_by_fill_weights():
    left, right = split_horizontal(Rect(0, 0, 100, 10), [3, 2])
    assert left == Rect(0, 0, 60, 10)
    assert right == Rect(60, 0, 40, 10)


def test_split_vertical_halves():
    top, bottom = split_vertical(Rect(1, 2, 20, 10), [50, 50])
    assert top == Rect(1, 2, 20, 5)
    assert bottom == Rect(1, 7, 20, 5)


@pytest.mark.parametrize("total", [0, 1, 7, 23, 101])
def test_split_covers_whole_area(total):
    parts = split_horizontal(Rect(4, 0, total, 3), [1, 2, 3])
    assert sum(part.width for part in parts) == total
    assert parts[0].x == 4
    assert parts[-1].right == 4 + total
    for before, after in zip(parts, parts[1:]):
        assert before.right == after.x


def test_split_rejects_zero_weights():
    with pytest.raises(ValueError):
        split_vertical(Rect(0, 0, 10, 10), [0, 0])


def test_split_rejects_negative_weight():
    with pytest.raises(ValueError):
        split_horizontal(Rect(0, 0, 10, 10), [2, -1])


def test_split_rejects_empty_weights():
    with pytest.raises(ValueError):
        split_horizontal(Rect(0, 0, 10, 10), [])