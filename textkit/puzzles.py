"""Small algorithm puzzles: grid path sum and two-sum."""
from typing import Dict, Optional, Sequence, Tuple, Union

from textkit.errors import InvalidArgumentError

Number = Union[int, float]


def max_path_sum(matrix: Sequence[Sequence[Number]]) -> Number:
    """
    Largest total of a left-to-right path through ``matrix``.

    The path starts in any cell of the first column and ends in any cell of
    the last one; from each cell it moves one column right, to the row above,
    the same row or the row below.

    >>> max_path_sum([[1, 3, 3], [2, 1, 4], [0, 6, 4]])
    12

    Neighbours outside the grid contribute 0 to the comparison, so with
    negative values a path may appear to come from off the grid.
    """
    if not matrix or not matrix[0]:
        raise InvalidArgumentError("matrix must have at least one row and one column")
    num_rows = len(matrix)
    num_cols = len(matrix[0])
    for row_index, row in enumerate(matrix):
        if len(row) != num_cols:
            raise InvalidArgumentError(
                "matrix rows must all have the same length",
                details={"row": row_index, "expected": num_cols, "got": len(row)},
            )

    best = [row[0] for row in matrix]
    for col in range(1, num_cols):
        best = [
            matrix[row][col]
            + max(
                best[row - 1] if row > 0 else 0,
                best[row],
                best[row + 1] if row < num_rows - 1 else 0,
            )
            for row in range(num_rows)
        ]

    return max(best)


def two_sum(nums: Sequence[Number], target: Number) -> Optional[Tuple[int, int]]:
    """
    Indices ``(i, j)``, ``j < i``, with ``nums[i] + nums[j] == target``.

    ``i`` is the first index that completes a pair; ``j`` is the latest earlier
    index holding the complement. None if there is no such pair.
    """
    seen: Dict[Number, int] = {}
    for i, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return i, seen[complement]
        seen[value] = i
    return None
