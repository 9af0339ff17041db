import pytest

from dsdemo.arraylist import ArrayList, main


def _filled(values):
    items = ArrayList(len(values))
    for i, v in enumerate(values):
        items[i] = v
    return items


def test_fill_value_everywhere():
    items = ArrayList(5, 3)
    assert list(items) == [3, 3, 3, 3, 3]
    assert len(items) == 5


def test_default_is_empty():
    assert len(ArrayList()) == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ArrayList(-1)


def test_find_first_match():
    items = _filled([7, 4, 9, 4])
    assert items.find(4) == 1
    assert items.find(7) == 0


def test_find_missing_returns_minus_one():
    assert _filled([1, 2, 3]).find(42) == -1


def test_index_out_of_range():
    with pytest.raises(IndexError):
        ArrayList(2)[5]


def test_merge_sort_matches_sorted():
    values = [5, 1, 4, 2, 3, 9, 0, 4, -7]
    items = _filled(values)
    items.merge_sort()
    assert list(items) == sorted(values)


def test_merge_sort_is_stable():
    class Key:
        def __init__(self, k, tag):
            self.k, self.tag = k, tag

        def __le__(self, other):
            return self.k <= other.k

    values = [Key(2, "a"), Key(1, "b"), Key(2, "c"), Key(1, "d")]
    items = _filled(values)
    items.merge_sort()
    assert [v.tag for v in items] == ["b", "d", "a", "c"]


def test_merge_sort_single_and_empty():
    one = _filled([8])
    one.merge_sort()
    assert list(one) == [8]
    empty = ArrayList()
    empty.merge_sort()
    assert list(empty) == []


@pytest.mark.parametrize("value", [1, 2, 3, 5, 8])
def test_fast_find_on_sorted(value):
    items = _filled([1, 2, 2, 3, 5, 8])
    index = items.fast_find(value)
    assert items[index] == value
    assert index == items.find(value)


def test_fast_find_missing():
    assert _filled([1, 3, 5]).fast_find(4) == -1


def test_str_is_tab_separated():
    assert str(_filled([0, 1, 2])) == "0\t1\t2\t"


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Begin to test..."
    assert out[-1] == "1\t2\t3\t4\t5\t"