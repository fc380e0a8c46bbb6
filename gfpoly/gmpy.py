"""This module collects all gmpy2 functions used by gfpoly.

Next to these, the integer arithmetic needed for polynomials over GF(p) is provided:
modular inverses via the extended Euclidean algorithm, powers p^n giving the order
of extension fields, and the distinct prime divisors of (small) integers.
"""

import logging
from gmpy2 import version, mpz, is_prime, next_prime, gcdext
from gfpoly.errors import NotInvertible

logging.debug(f'Load gmpy2 version {version()}')


def mod_inverse(a, p):
    """Return the inverse of a modulo p, as an integer in {0, ... , p-1}.

    Raises NotInvertible if gcd(a, p) != 1.
    """
    g, s, _ = gcdext(a, p)
    if g != 1:
        raise NotInvertible(f'{a} is not invertible modulo {p}')

    return int(s % p)


def int_pow(base, exponent):
    """Return base**exponent as a (Python) integer, for nonnegative exponent."""
    if exponent < 0:
        raise ValueError('negative exponent')

    return int(mpz(base)**exponent)


def prime_divisors(n):
    """Return the list of distinct prime divisors of n, in increasing order.

    Trial division by primes up to sqrt(n), hence only intended for small n.
    """
    d = []
    if n < 2:
        return d

    q = 2
    while q * q <= n:
        if n % q == 0:
            d.append(q)
            while n % q == 0:
                n //= q
        q = int(next_prime(q))
    if n > 1:
        d.append(n)
    return d
