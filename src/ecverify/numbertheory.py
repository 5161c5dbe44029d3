"""
Modular arithmetic helpers.

Python integers are arbitrary precision, so this module only adds the
operations the curve code needs on top of them: modular normalization,
modular inverse and a probable-prime test for validating curve constants.
"""

# Witnesses for Miller-Rabin. Fixed so the check is reproducible.
_PRIME_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)


def normalize(value: int, modulus: int) -> int:
    """Reduce value into the range [0, modulus)"""
    return value % modulus


def inverse_mod(a: int, m: int) -> int:
    """
    Compute the modular inverse of a modulo m.

    Uses the iterative extended Euclidean algorithm.

    Args:
        a: Value to invert
        m: Modulus (positive)

    Returns:
        b in [0, m) such that a * b = 1 (mod m)

    Raises:
        ZeroDivisionError: If a is congruent to zero modulo m
        ValueError: If a and m are not coprime
    """
    a = a % m
    if a == 0:
        raise ZeroDivisionError("division by zero")

    old_r, r = a, m
    old_s, s = 1, 0

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s

    # old_r is gcd(a, m)
    if old_r != 1:
        raise ValueError("inverse does not exist")

    return old_s % m


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin primality test with a fixed witness set"""
    if n < 2:
        return False
    for prime in _PRIME_WITNESSES:
        if n == prime:
            return True
        if n % prime == 0:
            return False

    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for witness in _PRIME_WITNESSES:
        x = pow(witness, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False

    return True
