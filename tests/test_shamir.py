import random

import pytest

from zkproofs.field import BN254_FQ
from zkproofs.shamir import (
    password_recover_secret,
    password_shares,
    recover_secret,
    shares,
)

F = BN254_FQ


def test_recover_secret():
    secret = F(17)
    result = shares(secret, 4, 10, random.Random(1))
    assert recover_secret(result) == secret


def test_recover_wrong_secret_fails():
    secret = F(17)
    recovered = recover_secret(shares(secret, 4, 10, random.Random(2)))
    assert recovered == F(17)
    assert not recovered == F(10)


def test_share_count_and_x_points():
    result = shares(F(17), 4, 10, random.Random(3))
    assert [x for x, _ in result] == [F(i) for i in range(1, 10)]


def test_threshold_subset_recovers_secret():
    secret = F(12345)
    result = shares(secret, 3, 8, random.Random(4))
    assert recover_secret(result[2:5]) == secret
    assert recover_secret(result[-3:]) == secret


def test_threshold_one_gives_constant_shares():
    result = shares(F(9), 1, 4, random.Random(5))
    assert [y for _, y in result] == [F(9)] * 3


def test_invalid_threshold():
    with pytest.raises(ValueError):
        shares(F(1), 0, 5)


def test_recover_from_no_shares():
    with pytest.raises(ValueError):
        recover_secret([])


def test_password_recover_secret():
    password = 0
    secret = F(17)
    result = password_shares(secret, password, 4, 10, random.Random(6))
    assert password_recover_secret(result, password) == secret


def test_password_recover_wrong_secret_fails():
    password = 0
    recovered = password_recover_secret(
        password_shares(F(17), password, 4, 10, random.Random(7)), password
    )
    assert recovered == F(17)
    assert not recovered == F(10)


def test_password_nonzero_point():
    password = 42
    secret = F(999)
    result = password_shares(secret, password, 4, 10, random.Random(8))
    assert len(result) == 9
    assert password_recover_secret(result, password) == secret


def test_password_colliding_with_random_points():
    password = 2
    with pytest.raises(ValueError):
        password_shares(F(5), password, 4, 10)