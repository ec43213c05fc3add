from __future__ import annotations

import math
import warnings
from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from tensorscript.utils.error_handling import ErrorMode, InvalidTypeError, ShapeMismatchError

Matrix = list[list[Any]]


def _is_sequence(x: Any) -> bool:
    return isinstance(x, (Sequence, np.ndarray)) and not isinstance(x, (str, bytes, bytearray))


def get_input_shape(matrix: Any) -> tuple[int, int]:
    """
    Returns the shape of an input matrix.

    Every row must have the same length as the first one.

    Examples:
        >>> get_input_shape([[0, 1], [1, 0]])
        (2, 2)
        >>> get_input_shape([[1, 0, 4, 5], [1, 0, 4, 5], [1, 0, 4, 5]])
        (3, 4)

    Args:
        matrix (Sequence[Sequence[float]] | np.ndarray): Input matrix.

    Returns:
        tuple[int, int]: `(n_rows, n_cols)` of the matrix.

    Raises:
        InvalidTypeError: If `matrix` is not a non-empty sequence whose first \
            row is a non-empty sequence.
        ShapeMismatchError: If any row differs in length from the first one.

    """
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2 or 0 in matrix.shape:
            msg = f"input must be a matrix, received an array of shape {matrix.shape}"
            raise InvalidTypeError(msg)
        return tuple(map(int, matrix.shape))

    if not _is_sequence(matrix) or len(matrix) == 0 or not _is_sequence(matrix[0]) or len(matrix[0]) == 0:
        msg = "input must be a matrix"
        raise InvalidTypeError(msg)

    n_cols = len(matrix[0])
    for i, row in enumerate(matrix):
        if not _is_sequence(row) or len(row) != n_cols:
            msg = f"input must have the same length in each row (expected {n_cols}, row {i} differs)"
            raise ShapeMismatchError(msg)

    return (len(matrix), n_cols)


def reshape(
    flat: Iterable[Any],
    shape: Sequence[int],
    *,
    errors: ErrorMode | str = ErrorMode.RAISE,
) -> Matrix:
    """
    Rebuilds a row-major matrix from a flat sequence.

    Value `i` of `flat` is placed in row `i // n_cols`, giving \
    `ceil(len(flat) / n_cols)` rows.

    Examples:
        >>> reshape([0, 1, 1, 0], (2, 2))
        [[0, 1], [1, 0]]

    Args:
        flat (Iterable[float]): Flat, row-major values.
        shape (Sequence[int]): Target `(n_rows, n_cols)`.
        errors (ErrorMode, optional): How to treat a final row shorter than \
            `n_cols`. RAISE throws a ShapeMismatchError, WARN emits a warning \
            and keeps the short row, IGNORE keeps it silently. Defaults to RAISE.

    Returns:
        list[list[float]]: The reconstructed matrix.

    Raises:
        InvalidTypeError: If `shape` is not a pair of non-negative integers.
        ShapeMismatchError: If the number of produced rows differs from `n_rows`, \
            or (in RAISE mode) the final row is short.

    """
    errors = ErrorMode(errors)
    values = list(flat)
    n_rows, n_cols = _validate_target_shape(shape, n_values=len(values))

    chunks: Matrix = [[] for _ in range(math.ceil(len(values) / n_cols) if values else 0)]
    for i, v in enumerate(values):
        chunks[i // n_cols].append(v)

    if len(chunks) != n_rows:
        msg = f"specified shape ({n_rows}, {n_cols}) is not compatible with input of length {len(values)}"
        raise ShapeMismatchError(msg)

    if chunks and len(chunks[-1]) != n_cols:
        msg = (
            f"input of length {len(values)} does not divide evenly into rows of {n_cols}; "
            f"final row has {len(chunks[-1])} values"
        )
        if errors == ErrorMode.RAISE:
            raise ShapeMismatchError(msg)
        if errors == ErrorMode.WARN:
            warnings.warn(msg, category=UserWarning, stacklevel=2)

    return chunks


def _validate_target_shape(shape: Sequence[int], n_values: int) -> tuple[int, int]:
    if not _is_sequence(shape) or len(shape) != 2:
        msg = f"shape must be a (n_rows, n_cols) pair, received: {shape!r}"
        raise InvalidTypeError(msg)
    if not all(isinstance(x, (int, np.integer)) and not isinstance(x, (bool, np.bool_)) for x in shape):
        msg = f"shape must contain integers, received: {shape!r}"
        raise InvalidTypeError(msg)
    n_rows, n_cols = shape_to_tuple(shape)
    if n_rows < 0 or n_cols < 0:
        msg = f"shape must be non-negative, received: {shape!r}"
        raise InvalidTypeError(msg)
    if n_cols == 0 and n_values > 0:
        msg = f"cannot place {n_values} values into rows of length 0"
        raise ShapeMismatchError(msg)
    # An empty input only fits zero rows; avoid dividing by a zero column count
    return n_rows, max(n_cols, 1)


def flatten(matrix: Any) -> list[Any]:
    """Returns the row-major flat list of a rectangular matrix."""
    get_input_shape(matrix)
    return [v for row in matrix for v in row]


def ensure_matrix(x: Any) -> Any:
    """
    Wraps a flat sequence as a single-row matrix.

    Matrices (sequences whose first element is itself a sequence) are returned as-is.

    Raises:
        InvalidTypeError: If `x` is not a sequence or an array with at least one dimension.

    """
    if not _is_sequence(x) or (isinstance(x, np.ndarray) and x.ndim == 0):
        msg = f"invalid input matrix, received: {type(x).__name__}"
        raise InvalidTypeError(msg)
    if isinstance(x, np.ndarray):
        return x.reshape(1, -1) if x.ndim == 1 else x
    if len(x) > 0 and not _is_sequence(x[0]):
        return [x]
    return x


def shape_to_tuple(value: Iterable[int] | Sequence[int]) -> tuple[int, ...]:
    """Utility to normalize sequences (e.g., shapes) into integer tuples."""
    return tuple(int(x) for x in value)
