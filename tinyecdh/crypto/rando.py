"""
Copyright (c) 2020, The TinyECDH developers
See LICENSE for details
"""

import os

from tinyecdh import EntropyError, RandomRangeError


def checkRange(low, high):
    """
    Check that [low, high) is a usable range.

    Args:
        low int: the inclusive lower bound.
        high int: the exclusive upper bound.

    Raises:
        RandomRangeError if low is negative or the range is empty.
    """
    if low < 0:
        raise RandomRangeError(f"Invalid range: low bound {low} < 0")
    if low >= high:
        raise RandomRangeError(f"Invalid range: low bound {low} >= high bound {high}")


def generateSeed(length):
    """
    Generate cryptographically-strong random bytes.

    Returns:
        bytes: a random bytes object of the given length.

    Raises:
        EntropyError if the operating system source is unavailable.
    """
    try:
        return os.urandom(length)
    except (NotImplementedError, OSError) as err:
        raise EntropyError("system randomness source failed") from err


def randInt(low, high):
    """
    Draw an integer uniformly from [low, high). Candidates of the bit length of
    the range width are drawn and rejected until one falls inside, so every
    value is equally likely.

    Args:
        low int: the inclusive lower bound. Must be >= 0.
        high int: the exclusive upper bound. Must be > low.

    Returns:
        int: the random integer.

    Raises:
        RandomRangeError if the range is invalid.
        EntropyError if the operating system source is unavailable.
    """
    checkRange(low, high)
    span = high - low
    bits = span.bit_length()
    mask = (1 << bits) - 1
    byteLen = (bits + 7) // 8
    while True:
        r = int.from_bytes(generateSeed(byteLen), "big") & mask
        if r < span:
            return low + r
