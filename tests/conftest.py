"""
Copyright (c) 2020, The TinyECDH developers
See LICENSE for details
"""

import pytest

from tinyecdh.crypto.ecc.curve import Curve, Point
from tinyecdh.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def labCurve():
    """
    y² = x³ + 2x + 3 over GF(97).
    """
    return Curve(2, 3, 97)


@pytest.fixture
def labGenerator():
    """
    (3, 6) on the lab curve. It generates a subgroup of order 5.
    """
    return Point(3, 6)


@pytest.fixture
def curvePoints():
    def _curvePoints(curve):
        """
        Every element of a small curve's group, the identity first.
        """
        pts = [Point.identity()]
        for x in range(curve.p):
            for y in range(curve.p):
                pt = Point(x, y)
                if curve.isOnCurve(pt):
                    pts.append(pt)
        return pts

    return _curvePoints
