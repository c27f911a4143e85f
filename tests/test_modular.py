import pytest

from problemset.modular import (
    MOD,
    exponentiation,
    mod_add,
    mod_div,
    mod_inv,
    mod_mul,
    mod_pow,
    mod_sub,
    tower_exponentiation,
)


def test_exponentiation_sample_values():
    assert exponentiation(3, 4) == 81
    assert exponentiation(2, 8) == 256


@pytest.mark.parametrize("base", [0, 1, 7, MOD, 123456789])
def test_zero_exponent_gives_one(base):
    assert mod_pow(base, 0, 13) == 1
    assert exponentiation(base, 0) == 1


@pytest.mark.parametrize("a,b,c", [(2, 10, 20), (123, 45, 6789), (MOD - 1, 3, 5)])
def test_power_of_sum_is_product_of_powers(a, b, c):
    assert exponentiation(a, b + c) == mod_mul(exponentiation(a, b), exponentiation(a, c))


@pytest.mark.parametrize("a", [2, 3, 999, MOD - 1])
def test_fermat_little_theorem(a):
    assert mod_pow(a, MOD - 1) == 1


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        mod_pow(2, -1)


@pytest.mark.parametrize("a", [1, 2, 12345, MOD - 2, 10**18])
def test_inverse_times_value_is_one(a):
    assert mod_mul(a, mod_inv(a)) == 1


@pytest.mark.parametrize("a,b", [(10, 3), (MOD + 5, 17), (99999, 123456789)])
def test_division_undoes_multiplication(a, b):
    assert mod_div(mod_mul(a, b), b) == a % MOD


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        mod_div(5, MOD)


@pytest.mark.parametrize("a,b", [(3, 10), (10, 3), (MOD + 1, 2 * MOD), (0, 1)])
def test_add_and_sub_round_trip(a, b):
    assert mod_sub(mod_add(a, b), b) == a % MOD
    assert 0 <= mod_sub(a, b) < MOD


@pytest.mark.parametrize("a,b,c", [(3, 7, 1), (2, 3, 4), (5, 2, 10), (11, 4, 3)])
def test_tower_matches_direct_power(a, b, c):
    assert tower_exponentiation(a, b, c) == exponentiation(a, b**c)


def test_tower_with_zero_inner_exponent():
    assert tower_exponentiation(7, 5, 0) == exponentiation(7, 1)