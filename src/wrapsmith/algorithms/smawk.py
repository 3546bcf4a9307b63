"""Row and column minima of totally monotone matrices.

The SMAWK algorithm (Aggarwal, Klawe, Moran, Shor and Wilber) finds the row
minima of an ``n x m`` totally monotone matrix in ``O(n + m)`` lookups. The
online variant (Galil and Park) finds column minima of an upper triangular
matrix whose entries in column ``j`` may depend on the minima of the columns
before ``j``, which is the shape of the line breaking recurrence.

Both routines follow D. Eppstein's ``ConcaveMinima`` and
``OnlineConcaveMinima`` formulations. Ties resolve to the smallest index.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar


Row = TypeVar("Row")
Col = TypeVar("Col")

Minimum = tuple[int, float]


def smawk_row_minima(
    rows: Sequence[Row],
    cols: Sequence[Col],
    lookup: Callable[[Row, Col], float],
) -> dict[Row, Col]:
    """Map every row to the column holding its minimum.

    ``lookup(row, col)`` must describe a totally monotone matrix: the column
    of the minimum never moves left when moving down the rows.

    >>> matrix = [[3, 2, 4], [5, 3, 2], [6, 4, 1]]
    >>> smawk_row_minima([0, 1, 2], [0, 1, 2], lambda r, c: matrix[r][c])
    {0: 1, 1: 2, 2: 2}
    """
    minima: dict[Row, Col] = {}
    _row_minima(list(rows), list(cols), lookup, minima)
    return {row: minima[row] for row in rows}


def _row_minima(
    rows: list[Row],
    cols: list[Col],
    lookup: Callable[[Row, Col], float],
    minima: dict[Row, Col],
) -> None:
    if not rows:
        return

    # Reduce to at most as many columns as rows.
    stack: list[Col] = []
    for col in cols:
        while stack and lookup(rows[len(stack) - 1], stack[-1]) > lookup(rows[len(stack) - 1], col):
            stack.pop()
        if len(stack) != len(rows):
            stack.append(col)
    cols = stack

    _row_minima(rows[1::2], cols, lookup, minima)

    # Even rows search between the minima of their odd neighbours.
    col_index = 0
    for row_index in range(0, len(rows), 2):
        row = rows[row_index]
        if row_index + 1 < len(rows):
            last = minima[rows[row_index + 1]]
        else:
            last = cols[-1]
        best_value = lookup(row, cols[col_index])
        best_index = col_index
        while cols[col_index] != last:
            col_index += 1
            value = lookup(row, cols[col_index])
            if value < best_value:
                best_value = value
                best_index = col_index
        minima[row] = cols[best_index]


def online_column_minima(
    initial: float,
    size: int,
    matrix: Callable[[list[Minimum], int, int], float],
) -> list[Minimum]:
    """Compute the column minima of an online upper triangular matrix.

    Entry ``(i, j)`` with ``i < j`` is ``matrix(minima, i, j)`` where
    ``minima`` holds the ``(row, value)`` minimum of every column up to at
    least ``i``. Column ``0`` has the value ``initial``. The matrix must be
    totally monotone; entries below the diagonal are never evaluated.

    Returns ``size`` pairs ``(row, value)``, one per column.
    """
    result: list[Minimum] = [(0, initial)]
    finished = 0
    base = 0
    tentative = 0

    def lookup(col: int, row: int) -> float:
        return matrix(result, row, col)

    while finished < size - 1:
        i = finished + 1
        if i > tentative:
            rows = list(range(base, finished + 1))
            tentative = min(finished + len(rows), size - 1)
            cols = list(range(finished + 1, tentative + 1))
            minima = smawk_row_minima(cols, rows, lookup)
            for col in cols:
                row = minima[col]
                value = matrix(result, row, col)
                if col >= len(result):
                    result.append((row, value))
                elif value < result[col][1]:
                    result[col] = (row, value)
            finished = i
            continue

        diagonal = matrix(result, i - 1, i)
        if diagonal < result[i][1]:
            result[i] = (i - 1, diagonal)
            base = i - 1
            tentative = finished = i
        elif matrix(result, i - 1, tentative) >= result[tentative][1]:
            finished = i
        else:
            base = i - 1
            tentative = finished = i

    return result


__all__ = ["online_column_minima", "smawk_row_minima"]
