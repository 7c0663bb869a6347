"""
Copyright (c) 2020, The TinyECDH developers
See LICENSE for details
"""


class ECDHError(Exception):
    pass


class ValidationError(ECDHError):
    """
    ValidationError is raised at a construction boundary, before any
    arithmetic takes place, when a caller-supplied value breaks an invariant.
    """

    pass


class NonPrimeModulus(ValidationError):
    pass


class SingularCurve(ValidationError):
    pass


class InvalidGenerator(ValidationError):
    pass


class InvalidPublicKey(ValidationError):
    pass


class InvalidScalar(ValidationError):
    pass


class NoInverseError(ECDHError, ArithmeticError):
    """
    NoInverseError signals a modular inverse was requested for a value that
    has none. With a prime modulus and on-curve inputs the group law never
    asks for one, so seeing this means a precondition was violated upstream.
    """

    pass


class RandomRangeError(ECDHError, ValueError):
    pass


class EntropyError(ECDHError):
    pass
