import warnings

import numpy as np
import pytest

from tensorscript.utils.data.shape_utils import (
    ensure_matrix,
    flatten,
    get_input_shape,
    reshape,
    shape_to_tuple,
)
from tensorscript.utils.error_handling import ErrorMode, InvalidTypeError, ShapeMismatchError


# ---------------------------------------------------------------------
# get_input_shape
# ---------------------------------------------------------------------
@pytest.mark.unit
@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        ([[1, 0], [0, 1]], (2, 2)),
        ([[1, 0]] * 6 + [[0, 1]], (7, 2)),
        ([[1, 0, 4, 5]] * 5, (5, 4)),
        ([[3.5]], (1, 1)),
        (((1, 2, 3), (4, 5, 6)), (2, 3)),
        (np.zeros((3, 4)), (3, 4)),
    ],
)
def test_get_input_shape(matrix, expected):
    assert get_input_shape(matrix) == expected


@pytest.mark.unit
def test_get_input_shape_ragged_rows():
    matrix = [
        [1, 0, 4, 5],
        [1, 0, 4],
        [1, 0, 4, 5],
    ]
    with pytest.raises(ShapeMismatchError, match="input must have the same length in each row"):
        get_input_shape(matrix)


@pytest.mark.unit
def test_get_input_shape_names_expected_length():
    with pytest.raises(ShapeMismatchError, match=r"expected 2"):
        get_input_shape([[1, 2], [3, 4], [5]])


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    [None, [], [[]], [1, 2, 3], "abc", ["ab", "cd"], 42, np.zeros(3), np.zeros((0, 2))],
)
def test_get_input_shape_rejects_non_matrix(value):
    with pytest.raises(InvalidTypeError, match="must be a matrix"):
        get_input_shape(value)


@pytest.mark.unit
def test_error_types_subclass_builtins():
    assert issubclass(InvalidTypeError, TypeError)
    assert issubclass(ShapeMismatchError, ValueError)


# ---------------------------------------------------------------------
# reshape
# ---------------------------------------------------------------------
@pytest.mark.unit
def test_reshape_square():
    assert reshape([0, 1, 1, 0], (2, 2)) == [[0, 1], [1, 0]]


@pytest.mark.unit
@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 2, 3], [4, 5, 6]],
        [[1], [2], [3]],
        [[0.5, 1.5, 2.5, 3.5]],
    ],
)
def test_reshape_inverts_flatten(matrix):
    shape = get_input_shape(matrix)
    rebuilt = reshape(flatten(matrix), shape)
    assert rebuilt == matrix
    assert get_input_shape(rebuilt) == shape


@pytest.mark.unit
def test_reshape_wrong_row_count():
    # 7 values in rows of 2 gives 4 rows, not 3
    with pytest.raises(ShapeMismatchError, match=r"\(3, 2\) is not compatible with input of length 7"):
        reshape(list(range(7)), (3, 2))


@pytest.mark.unit
def test_reshape_short_final_row_raises_by_default():
    with pytest.raises(ShapeMismatchError, match="does not divide evenly"):
        reshape(list(range(7)), (4, 2))


@pytest.mark.unit
def test_reshape_short_final_row_ignore():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        out = reshape(list(range(7)), (4, 2), errors=ErrorMode.IGNORE)
    assert out == [[0, 1], [2, 3], [4, 5], [6]]


@pytest.mark.unit
def test_reshape_short_final_row_warn():
    with pytest.warns(UserWarning, match="final row has 1 values"):
        out = reshape(list(range(7)), (4, 2), errors="warn")
    assert out[-1] == [6]


@pytest.mark.unit
def test_reshape_does_not_alias_input():
    flat = [1, 2, 3, 4]
    out = reshape(flat, (2, 2))
    out[0][0] = 99
    assert flat == [1, 2, 3, 4]


@pytest.mark.unit
def test_reshape_accepts_numpy_and_empty():
    assert reshape(np.arange(6), (3, 2)) == [[0, 1], [2, 3], [4, 5]]
    assert reshape([], (0, 3)) == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "shape",
    [(2,), (1, 2, 3), "ab", (-1, 2), ("a", 2), (2.7, 2), (2, 2.0), (True, 4), ("2", "2")],
)
def test_reshape_rejects_bad_shape(shape):
    with pytest.raises(InvalidTypeError):
        reshape([1, 2], shape)


@pytest.mark.unit
def test_reshape_zero_columns_with_values():
    with pytest.raises(ShapeMismatchError):
        reshape([1, 2], (1, 0))


# ---------------------------------------------------------------------
# flatten / ensure_matrix / shape_to_tuple
# ---------------------------------------------------------------------
@pytest.mark.unit
def test_flatten_rejects_ragged():
    with pytest.raises(ShapeMismatchError):
        flatten([[1, 2], [3]])


@pytest.mark.unit
def test_ensure_matrix():
    assert ensure_matrix([1, 2, 3]) == [[1, 2, 3]]
    assert ensure_matrix([[1, 2, 3]]) == [[1, 2, 3]]
    assert ensure_matrix(np.arange(3)).shape == (1, 3)
    assert ensure_matrix(np.zeros((2, 3))).shape == (2, 3)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ([1, 2, 3], (1, 2, 3)),
        ((4, 5), (4, 5)),
        (np.array([7, 8]), (7, 8)),
        ([], ()),
    ],
)
def test_shape_to_tuple(value, expected):
    assert shape_to_tuple(value) == expected
    assert isinstance(shape_to_tuple(value), tuple)


@pytest.mark.unit
def test_reshape_accepts_numpy_integer_shape():
    assert reshape([1, 2, 3, 4], (np.int64(2), np.int32(2))) == [[1, 2], [3, 4]]


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, 3, 2.5, "abc", np.float64(1.0)])
def test_ensure_matrix_rejects_non_sequence(value):
    with pytest.raises(InvalidTypeError, match="invalid input matrix"):
        ensure_matrix(value)
