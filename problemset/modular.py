"""Modular arithmetic over the prime 10**9 + 7 and the exponentiation tasks built on it."""

MOD = 1_000_000_007


def mod_pow(base: int, exponent: int, modulus: int = MOD) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus``.

    A zero exponent always yields 1, whatever the modulus.
    """
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def mod_mul(a: int, b: int) -> int:
    """Return ``a * b`` modulo MOD."""
    return (a % MOD) * (b % MOD) % MOD


def mod_add(a: int, b: int) -> int:
    """Return ``a + b`` modulo MOD."""
    return (a % MOD + b % MOD) % MOD


def mod_sub(a: int, b: int) -> int:
    """Return ``a - b`` modulo MOD, in the range [0, MOD)."""
    return (a % MOD - b % MOD) % MOD


def mod_inv(a: int) -> int:
    """Return the multiplicative inverse of ``a`` modulo MOD."""
    if a % MOD == 0:
        raise ZeroDivisionError("zero has no inverse modulo MOD")
    return mod_pow(a, MOD - 2)


def mod_div(a: int, b: int) -> int:
    """Return ``a / b`` modulo MOD."""
    return mod_mul(a, mod_inv(b))


def exponentiation(a: int, b: int) -> int:
    """Return ``a ** b`` modulo MOD."""
    return mod_pow(a, b, MOD)


def tower_exponentiation(a: int, b: int, c: int) -> int:
    """Return ``a ** (b ** c)`` modulo MOD.

    The inner power is reduced modulo MOD - 1, as Fermat's little theorem allows.
    """
    return mod_pow(a, mod_pow(b, c, MOD - 1), MOD)