"""
Copyright (c) 2020, The TinyECDH developers

This example script runs a two-party Diffie-Hellman exchange on the configured
curve. By default that is the lab curve y² = x³ + 2x + 3 over GF(97) with
generator (3, 6) and the secrets 6 and 10. Pass --random to draw fresh
secrets instead.
"""

import sys

from tinyecdh import config
from tinyecdh.util import helpers


def main():
    randomSecrets = "--random" in sys.argv
    cfg = config.load(argv=[a for a in sys.argv[1:] if a != "--random"])
    helpers.prepareLogging(logLvl=cfg.logLevel)
    dh = cfg.exchange()

    if randomSecrets:
        alice, bob = dh.generateKey(), dh.generateKey()
    else:
        alice, bob = dh.generateKeyPair(6), dh.generateKeyPair(10)

    aliceShared = dh.sharedSecretFor(alice, bob.public)
    bobShared = dh.sharedSecretFor(bob, alice.public)

    print(f"Curve      {dh.curve!r}")
    print(f"Generator  {dh.generator!r}")
    print(f"Alice      public: {alice.public!r}  shared: {aliceShared!r}")
    print(f"Bob        public: {bob.public!r}  shared: {bobShared!r}")
    print("Secrets equal:", aliceShared == bobShared)


if __name__ == "__main__":
    main()
