"""
Copyright (c) 2020, The TinyECDH developers
See LICENSE for details

Arithmetic in the prime field GF(p) that underlies a short Weierstrass curve.
Field elements are plain Python integers. Every helper returns the
non-negative representative in [0, p).
"""

import sympy

from tinyecdh import NoInverseError


def mod(v, p):
    """
    mod reduces v into [0, p). The result takes the sign of the divisor, so
    negative intermediates come back non-negative.

    Args:
        v (int): The value to reduce. May be negative.
        p (int): The positive modulus.

    Returns:
        int: v modulo p.
    """
    return v % p


def egcd(a, b):
    """
    Calculate the extended Euclidean algorithm. ax + by = gcd(a,b)

    The loop keeps the invariants a*x0 + b*y0 = r0 and a*x1 + b*y1 = r1, so
    the number of steps grows with the bit length of the inputs but the stack
    does not.

    Args:
        a (int): An integer.
        b (int): Another integer.

    Returns:
        int: Greatest common divisor.
        int: x coefficient of Bezout's identity.
        int: y coefficient of Bezout's identity.
    """
    r0, r1 = a, b
    x0, x1 = 1, 0
    y0, y1 = 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return (r0, x0, y0)


def inverse(v, p):
    """
    inverse returns the multiplicative inverse of v modulo p.

    Args:
        v (int): The value to invert. May be negative.
        p (int): The modulus.

    Returns:
        int: x in [0, p) such that v*x = 1 (mod p).

    Raises:
        NoInverseError: If gcd(v, p) != 1, including when v = 0 (mod p).
    """
    g, x, _ = egcd(mod(v, p), p)
    if g != 1:
        raise NoInverseError(f"{v} has no inverse modulo {p}")
    return mod(x, p)


def isProbablePrime(n):
    """
    isProbablePrime is the primality check used to validate curve moduli.
    sympy runs trial division and Miller-Rabin to fixed bases for small n and
    the strong Baillie-PSW test above that.

    Args:
        n (int): The candidate.

    Returns:
        bool: True if n is (probably) prime.
    """
    if n < 2:
        return False
    return bool(sympy.isprime(n))
