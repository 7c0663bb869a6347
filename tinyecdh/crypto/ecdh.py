"""
Copyright (c) 2020, The TinyECDH developers
See LICENSE for details

Elliptic-curve Diffie-Hellman key agreement.

Each party picks a secret scalar k and publishes k*G for a generator G that
both sides agree on. A party combines its own secret with the peer's public
point, and since scalar multiplication commutes, k1*(k2*G) = k2*(k1*G) is the
shared secret.

References:
  [SEC1] Elliptic Curve Cryptography, section 3.3.1
    https://www.secg.org/sec1-v2.pdf
"""

from tinyecdh import InvalidGenerator, InvalidPublicKey
from tinyecdh.crypto import rando
from tinyecdh.util import helpers


log = helpers.getLogger("ECDH")


class KeyPair:
    """
    KeyPair stores a participant's secret scalar and its corresponding public
    point.
    """

    def __init__(self, secret, public):
        self._secret = secret
        self._public = public

    @property
    def secret(self):
        return self._secret

    @property
    def public(self):
        return self._public

    def __repr__(self):
        return f"KeyPair(public={self._public!r})"


def generateKeyPair(curve, generator, secret):
    """
    generateKeyPair returns the KeyPair for secret on the given curve and
    generator, public = secret*generator.

    Args:
        curve (Curve): The validated curve.
        generator (Point): The agreed base point.
        secret (int): A non-negative secret scalar chosen by the caller.

    Returns:
        KeyPair: The key pair.

    Raises:
        InvalidGenerator: If generator is not on curve.
    """
    if not curve.isOnCurve(generator):
        raise InvalidGenerator(f"generator {generator!r} is not on {curve!r}")
    return KeyPair(secret, curve.scalarMult(generator, secret))


def deriveSharedSecret(curve, secret, peerPublic):
    """
    deriveSharedSecret combines the caller's secret with the peer's public
    point, returning secret*peerPublic.

    Args:
        curve (Curve): The validated curve.
        secret (int): The caller's secret scalar.
        peerPublic (Point): The peer's public point. Untrusted.

    Returns:
        Point: The shared secret point.

    Raises:
        InvalidPublicKey: If peerPublic is not on curve.
    """
    if not curve.isOnCurve(peerPublic):
        raise InvalidPublicKey(f"peer public key {peerPublic!r} is not on {curve!r}")
    return curve.scalarMult(peerPublic, secret)


def generateKey(curve, generator, randInt=rando.randInt):
    """
    generateKey draws a secret from [2, p) with randInt and returns its
    KeyPair. randInt takes (low, high) and can be swapped for a deterministic
    source in tests.
    """
    return generateKeyPair(curve, generator, randInt(2, curve.p))


class ECDH:
    """
    ECDH binds a curve to a generator that has been checked against it, so a
    session validates its domain parameters once.
    """

    def __init__(self, curve, generator):
        """
        Args:
            curve (Curve): The validated curve.
            generator (Point): The agreed base point.

        Raises:
            InvalidGenerator: If generator is not on curve.
        """
        if not curve.isOnCurve(generator):
            raise InvalidGenerator(f"generator {generator!r} is not on {curve!r}")
        self._curve = curve
        self._generator = generator
        log.debug(f"key exchange ready on {curve!r} with generator {generator!r}")

    @property
    def curve(self):
        return self._curve

    @property
    def generator(self):
        return self._generator

    def generateKeyPair(self, secret):
        """
        generateKeyPair returns the KeyPair for the caller's secret.
        """
        return KeyPair(secret, self._curve.scalarMult(self._generator, secret))

    def generateKey(self, randInt=rando.randInt):
        """
        generateKey returns a KeyPair for a freshly drawn secret.
        """
        return self.generateKeyPair(randInt(2, self._curve.p))

    def deriveSharedSecret(self, secret, peerPublic):
        return deriveSharedSecret(self._curve, secret, peerPublic)

    def sharedSecretFor(self, keyPair, peerPublic):
        return self.deriveSharedSecret(keyPair.secret, peerPublic)
