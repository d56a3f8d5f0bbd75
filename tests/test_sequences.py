import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.sequences import factorial, fibonacci, fibonacci_series


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


@given(st.integers(min_value=1, max_value=200))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_first_terms():
    assert fibonacci(1) == 0
    assert fibonacci(2) == 1


@given(st.integers(min_value=3, max_value=300))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("n", [0, -4])
def test_fibonacci_rejects_non_positive(n):
    with pytest.raises(ValueError):
        fibonacci(n)


@given(st.integers(min_value=0, max_value=80))
def test_series_length_and_terms(count):
    series = fibonacci_series(count)
    assert len(series) == count
    assert series == [fibonacci(i) for i in range(1, count + 1)]


def test_series_starts_with_zero_and_one():
    assert fibonacci_series(2) == [0, 1]


def test_series_negative_raises():
    with pytest.raises(ValueError):
        fibonacci_series(-1)