def lcs_length(left: str, right: str) -> int:
    """Length of the longest common subsequence of two strings."""
    # shorter string runs along the row, so memory is O(min(n, m))
    if len(left) > len(right):
        left, right = right, left
    n = len(left)
    if n == 0:
        return 0
    prev, cur = [0] * (n + 1), [0] * (n + 1)
    for rch in right:
        for j, lch in enumerate(left):
            if rch == lch:
                cur[j + 1] = prev[j] + 1
            else:
                cur[j + 1] = max(prev[j + 1], cur[j])
        prev, cur = cur, prev
    return prev[n]


def compare_similarity(left: str, right: str) -> float:
    """LCS length over the longer length, in [0, 1]. Two empty strings score 1.0."""
    size = max(len(left), len(right))
    if size == 0:
        return 1.0
    return lcs_length(left, right) / size
