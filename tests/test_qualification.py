import math
import pytest
from qualification import *

# tp = 8, tn = 70, fp = 2, fn = 20
p, n, P, N = 8, 2, 28, 72

def test_worked_example():
    assert q_confidence(p, n, P, N) == pytest.approx(0.8)
    assert q_true_positive_rate(p, n, P, N) == pytest.approx(8 / 28)
    assert q_false_positive_rate(p, n, P, N) == pytest.approx(2 / 72)
    assert q_support(p, n, P, N) == pytest.approx(0.08)
    assert q_support_difference(p, n, P, N) == pytest.approx(0.06)
    assert q_growth_rate(p, n, P, N) == pytest.approx(10.285714, rel = 1e-6)
    assert q_wracc(p, n, P, N) == pytest.approx(0.1 * (0.8 - 0.28))

def test_gain():
    expected = (8 / 28) * (math.log((8 / 28) / 0.1) - math.log(0.28))
    assert q_gain(p, n, P, N) == pytest.approx(expected)
    assert q_gain(0, 5, 10, 20) == 0.0
    assert q_gain(0, 0, 0, 20) == 0.0

def test_zero_denominators():
    assert q_confidence(0, 0, 5, 5) == 0.0
    assert q_true_positive_rate(0, 3, 0, 10) == 0.0
    assert q_false_positive_rate(4, 0, 10, 0) == 0.0
    assert q_support(0, 0, 0, 0) == 0.0
    assert q_support_difference(0, 0, 0, 0) == 0.0
    assert q_wracc(0, 0, 10, 10) == 0.0

def test_growth_rate_cases():
    assert q_growth_rate(0, 3, 10, 10) == 0.0
    assert q_growth_rate(0, 0, 10, 10) == 0.0
    assert q_growth_rate(4, 0, 10, 10) == math.inf
    assert q_growth_rate(4, 2, 10, 10) == pytest.approx(2.0)

def test_measures_bounds():
    for P in range(0, 6):
        for N in range(0, 6):
            for p in range(0, P + 1):
                for n in range(0, N + 1):
                    for q in [q_confidence, q_true_positive_rate, q_false_positive_rate, q_support, q_fisher]:
                        assert 0.0 <= q(p, n, P, N) <= 1.0
                    assert -0.25 <= q_wracc(p, n, P, N) <= 0.25

def test_fisher_known_value():
    # [[3, 0], [0, 3]]: each tail has probability 1/20
    assert q_fisher(3, 0, 3, 3) == pytest.approx(0.1)

def test_fisher_empty_table():
    assert q_fisher(0, 0, 0, 0) == 1.0

def test_fisher_decreases_with_true_positives():
    values = [q_fisher(tp, 2, tp + 20, 72) for tp in range(4, 20)]
    for a, b in zip(values, values[1:]):
        assert b < a
