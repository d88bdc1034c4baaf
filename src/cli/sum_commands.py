"""Summation command."""

import typer
from rich.table import Table

from src.summation import sum_to_n_a, sum_to_n_b, sum_to_n_c

from .utils import console

_STRATEGIES = (
    ("sum_to_n_a", "iterative", sum_to_n_a),
    ("sum_to_n_b", "closed form", sum_to_n_b),
    ("sum_to_n_c", "recursive", sum_to_n_c),
)


def sum_to_n(n: int = typer.Argument(..., help="Upper bound of the sum")) -> None:
    """
    ➕ Sum the integers 1..n with each strategy.
    """
    table = Table(title=f"Sum of 1..{n}")
    table.add_column("Function")
    table.add_column("Strategy")
    table.add_column("Result", justify="right")

    for name, strategy, func in _STRATEGIES:
        try:
            result = str(func(n))
        except RecursionError:
            result = "recursion limit exceeded"
        table.add_row(name, strategy, result)

    console.print(table)
