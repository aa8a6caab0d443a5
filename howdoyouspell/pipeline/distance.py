from __future__ import annotations


def levenshtein(a: str, b: str, cutoff: int | None = None) -> int:
    """Minimum number of single-character insertions, deletions or substitutions.

    With `cutoff`, any distance above it is reported as `cutoff + 1` so callers
    scanning many candidates can stop early on hopeless ones.
    """
    if a == b:
        return 0
    if cutoff is not None and abs(len(a) - len(b)) > cutoff:
        return cutoff + 1

    rows, cols = len(a) + 1, len(b) + 1
    matrix = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(matrix[i - 1][j], matrix[i][j - 1], matrix[i - 1][j - 1])
        # Row minima never decrease, so the final cell is already out of reach.
        if cutoff is not None and min(matrix[i]) > cutoff:
            return cutoff + 1
    return matrix[-1][-1]
