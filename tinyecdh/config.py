"""
Copyright (c) 2020, The TinyECDH developers
See LICENSE for details

Configuration settings for TinyECDH sessions.
"""

import argparse
import logging
import os

from tinyecdh import ECDHError
from tinyecdh.crypto.ecc.curve import Curve
from tinyecdh.crypto.ecdh import ECDH
from tinyecdh.util import helpers


# The data directory in an OS-appropriate location.
DATA_DIR = helpers.appDataDir("tinyecdh")

# The curve configuration file name.
CONFIG_NAME = "tinyecdh.conf"
CONFIG_PATH = os.path.join(DATA_DIR, CONFIG_NAME)

# Keys read from the configuration file.
CURVE_KEYS = ("a", "b", "p", "gx", "gy")

# The textbook curve y² = x³ + 2x + 3 over GF(97) with generator (3, 6).
LabCurveConfig = {"a": "2", "b": "3", "p": "97", "gx": "3", "gy": "6"}

log = helpers.getLogger("CONFIG")


def parseInt(key, value):
    """
    Parse an integer setting. Any Python integer literal is accepted, so hex
    moduli can be written as 0x....

    Args:
        key (str): The setting name, for the error message.
        value (str): The raw setting.

    Returns:
        int: The parsed value.
    """
    try:
        return int(value.strip(), 0)
    except ValueError as err:
        raise ECDHError(f"config: {key} is not an integer: {value!r}") from err


class ECDHConfig:
    """
    ECDHConfig holds the curve domain parameters and generator for a session.
    Settings start from the lab curve and are overridden by any keys found in
    the INI-style configuration file.
    """

    def __init__(self, path=None, argv=None):
        """
        Args:
            path (str): Optional configuration file path. The --curve-config
                command-line argument takes precedence.
            argv (list(str)): Arguments to parse. Defaults to sys.argv.
        """
        parser = argparse.ArgumentParser()
        parser.add_argument("--curve-config", help="path to a curve config file")
        parser.add_argument("--debug", action="store_true", help="debug logging")
        args, unknown = parser.parse_known_args(argv)
        if unknown:
            log.warning(f"ignoring unknown arguments: {unknown!r}")
        self.logLevel = logging.DEBUG if args.debug else logging.INFO
        self.path = args.curve_config or path or CONFIG_PATH
        self.settings = dict(LabCurveConfig)
        if os.path.isfile(self.path):
            self.settings.update(helpers.readINI(self.path, CURVE_KEYS))
            log.debug(f"loaded curve settings from {self.path}")

    def get(self, key):
        """
        Retrieve an integer setting.

        Args:
            key (str): One of CURVE_KEYS.

        Returns:
            int: The configuration value.
        """
        if key not in self.settings:
            raise ECDHError(f"config: unknown key {key!r}")
        return parseInt(key, self.settings[key])

    def curve(self):
        """
        Build the configured curve. Raises a ValidationError if the parameters
        do not describe a valid curve.
        """
        return Curve(self.get("a"), self.get("b"), self.get("p"))

    def generator(self, curve=None):
        """
        The configured generator, reduced into the field of curve, or of the
        configured curve when none is passed. It is not checked for membership
        here.
        """
        if curve is None:
            curve = self.curve()
        return curve.point(self.get("gx"), self.get("gy"))

    def exchange(self):
        """
        An ECDH session for the configured curve and generator. The curve is
        built and validated once.
        """
        curve = self.curve()
        return ECDH(curve, self.generator(curve))


ecdhConfig = None


def load(path=None, argv=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular
    `load` function will return the same instance.

    Returns:
        ECDHConfig: The current configuration.
    """
    global ecdhConfig
    if not ecdhConfig:
        ecdhConfig = ECDHConfig(path, argv)
    return ecdhConfig
