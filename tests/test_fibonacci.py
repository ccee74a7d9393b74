import pytest

from zkproofs.fibonacci import evaluation
from zkproofs.field import BN254_FQ

F = BN254_FQ


@pytest.mark.parametrize("x", [3, 4, 5, 6, 7])
def test_evaluation_points_within(x):
    value = F(x)
    assert evaluation(value) == evaluation(value - F(1)) + evaluation(value - F(2))


def test_evaluation_at_7():
    assert evaluation(F(7)) == F(21)


def test_evaluation_at_4():
    assert evaluation(F(4)) == F(5)