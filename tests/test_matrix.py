import pytest

from tableau_optimizer.lp.matrix import Matrix


def test_matrix_starts_empty_and_grows():
    matrix = Matrix()
    assert (matrix.num_rows, matrix.num_cols) == (0, 0)

    assert matrix.add_row() == 0
    assert matrix.add_column() == 0
    assert matrix.add_column() == 1
    assert matrix.add_row() == 1
    assert (matrix.num_rows, matrix.num_cols) == (2, 2)
    assert matrix.get(1, 1) == 0.0


def test_add_column_extends_existing_rows():
    matrix = Matrix()
    matrix.add_row()
    matrix.add_column()
    matrix.set(0, 0, 5.0)
    matrix.add_column()

    assert matrix.get(0, 0) == 5.0
    assert matrix.get(0, 1) == 0.0


@pytest.mark.parametrize("row,col", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range_access_fails(row, col):
    matrix = Matrix()
    matrix.add_row()
    matrix.add_row()
    matrix.add_column()
    matrix.add_column()

    with pytest.raises(IndexError):
        matrix.get(row, col)
    with pytest.raises(IndexError):
        matrix.set(row, col, 1.0)


def test_row_operations():
    matrix = Matrix()
    for _ in range(2):
        matrix.add_row()
    for _ in range(3):
        matrix.add_column()
    for col, value in enumerate([2.0, 4.0, 6.0]):
        matrix.set(0, col, value)
    for col, value in enumerate([1.0, 1.0, 1.0]):
        matrix.set(1, col, value)

    matrix.divide_row(0, 2.0)
    matrix.subtract_row(1, 0, 1.0)

    assert list(matrix.row(0)) == [1.0, 2.0, 3.0]
    assert list(matrix.row(1)) == [0.0, -1.0, -2.0]


def test_row_returns_copy():
    matrix = Matrix()
    matrix.add_row()
    matrix.add_column()
    row = matrix.row(0)
    row[0] = 9.0
    assert matrix.get(0, 0) == 0.0


def test_str_renders_two_decimals():
    matrix = Matrix()
    matrix.add_row()
    matrix.add_column()
    matrix.add_column()
    matrix.set(0, 1, 1.5)
    assert str(matrix) == "0.00\t1.50"
