"""Tests for the three sum-to-n strategies."""

import pytest

from src.summation import sum_to_n_a, sum_to_n_b, sum_to_n_c

STRATEGIES = [sum_to_n_a, sum_to_n_b, sum_to_n_c]


@pytest.mark.parametrize("func", STRATEGIES)
class TestSumToN:
    def test_example(self, func):
        assert func(5) == 15

    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_non_positive_returns_zero(self, func, n):
        assert func(n) == 0

    def test_one(self, func):
        assert func(1) == 1

    @pytest.mark.parametrize("n", [2, 10, 99, 500])
    def test_matches_gauss_formula(self, func, n):
        assert func(n) == n * (n + 1) // 2

    @pytest.mark.parametrize("value", [2.5, "5", None, True])
    def test_rejects_non_integers(self, func, value):
        with pytest.raises(TypeError):
            func(value)


def test_strategies_agree():
    for n in range(-3, 200):
        assert sum_to_n_a(n) == sum_to_n_b(n) == sum_to_n_c(n)


def test_closed_form_handles_large_n():
    n = 10**12
    assert sum_to_n_b(n) == n * (n + 1) // 2
    assert isinstance(sum_to_n_b(n), int)
