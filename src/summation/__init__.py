"""Three strategies for summing the integers 1..n."""

from .sum_to_n import sum_to_n_a, sum_to_n_b, sum_to_n_c

__all__ = ["sum_to_n_a", "sum_to_n_b", "sum_to_n_c"]
