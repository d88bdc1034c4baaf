"""Sum of the integers from 1 to n.

Each function returns 0 for ``n <= 0`` and raises ``TypeError`` for anything
that is not an ``int`` (``bool`` included).
"""


def _check_int(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")


def sum_to_n_a(n: int) -> int:
    """Iterative accumulation.

    Time O(n), space O(1).
    """
    _check_int(n)
    if n < 1:
        return 0

    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_b(n: int) -> int:
    """Closed form (Gauss): n * (n + 1) / 2.

    Time O(1), space O(1).
    """
    _check_int(n)
    if n < 1:
        return 0

    # One of n, n + 1 is even so the floor division is exact
    return n * (n + 1) // 2


def sum_to_n_c(n: int) -> int:
    """Linear recursion.

    Time O(n), space O(n) on the call stack, so ``n`` is bounded by
    ``sys.getrecursionlimit()``.
    """
    _check_int(n)
    if n <= 0:
        return 0
    return n + sum_to_n_c(n - 1)
