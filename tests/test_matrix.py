import pytest

from dsdemo.matrix import Matrix, main


def test_square_holds_every_index_once():
    m = Matrix(3)
    values = sorted(m[i, j] for i in range(3) for j in range(3))
    assert values == list(range(9))


def test_column_major_layout():
    m = Matrix(3)
    assert m[0, 0] == 0
    assert m[0, 1] == 3


def test_rectangular():
    m = Matrix(2, 3)
    assert (m.rows, m.cols) == (2, 3)
    values = sorted(m[i, j] for i in range(2) for j in range(3))
    assert values == list(range(6))
    # consecutive rows in one column are consecutive in storage
    assert m[1, 2] == m[0, 2] + 1


def test_out_of_range():
    m = Matrix(2, 3)
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m[0, 3]
    with pytest.raises(IndexError):
        m[-1, 0]
    assert m[1, 2] == 5


def test_negative_size():
    with pytest.raises(ValueError):
        Matrix(-1)


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "0\t1\t2\t\n3\t4\t5\t\n6\t7\t8\t\n"