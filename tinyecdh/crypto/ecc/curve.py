"""
Copyright (c) 2020, The TinyECDH developers
See LICENSE for details

Pure Python group arithmetic on short Weierstrass curves
y² = x³ + ax + b over GF(p), for caller-supplied a, b and p.

References:
  [GECC]: Guide to Elliptic Curve Cryptography (Hankerson, Menezes, Vanstone)

All group operations are performed using affine coordinates. The point at
infinity has no coordinates and is represented by a flag on Point.
"""

from tinyecdh import InvalidScalar, NonPrimeModulus, SingularCurve

from .field import inverse, isProbablePrime, mod


class Point:
    """
    Point is either an affine (x, y) pair or the point at infinity. A Point
    carries no reference to a curve. The Curve it is used with supplies its
    meaning, and membership must be checked with Curve.isOnCurve before an
    untrusted Point is used.

    Points are values. The coordinates are read-only and every group
    operation returns a new Point.
    """

    def __init__(self, x=None, y=None, infinity=False):
        """
        Since this accepts arbitrary x and y coordinates, it allows creation
        of points that are not on any particular curve.
        """
        if not infinity and (x is None or y is None):
            raise ValueError("an affine point needs both coordinates")
        self._infinity = infinity
        self._x = None if infinity else x
        self._y = None if infinity else y

    @staticmethod
    def identity():
        """
        identity returns the point at infinity, the group's additive identity.
        """
        return Point(infinity=True)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def isIdentity(self):
        return self._infinity

    def __eq__(self, other):
        """
        __eq__ compares this Point to the one passed. Two identity points are
        always equal, an identity point never equals an affine point, and two
        affine points are equal if both coordinates are.
        """
        if not isinstance(other, Point):
            return NotImplemented
        if self._infinity or other._infinity:
            return self._infinity and other._infinity
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        if self._infinity:
            return hash(("Point", None))
        return hash(("Point", self._x, self._y))

    def __repr__(self):
        if self._infinity:
            return "Point(∞)"
        return f"Point({self._x}, {self._y})"


class Curve:
    """
    Curve holds the validated domain parameters (a, b, p) of the curve
    y² = x³ + ax + b over GF(p) and implements the group law on it.

    The parameters are checked once, at construction, and are read-only
    afterwards.
    """

    def __init__(self, a, b, p):
        """
        Args:
            a (int): Coefficient of x.
            b (int): Constant term.
            p (int): The field modulus. Must be prime.

        Raises:
            NonPrimeModulus: If p fails the primality test.
            SingularCurve: If 4a³ + 27b² = 0 (mod p).
        """
        if not isProbablePrime(p):
            raise NonPrimeModulus(f"curve modulus {p} is not prime")
        if mod(4 * a ** 3 + 27 * b ** 2, p) == 0:
            raise SingularCurve(f"a={a}, b={b} give a singular curve modulo {p}")
        self._a = a
        self._b = b
        self._p = p

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def p(self):
        return self._p

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return (self._a, self._b, self._p) == (other._a, other._b, other._p)

    def __hash__(self):
        return hash(("Curve", self._a, self._b, self._p))

    def __repr__(self):
        return f"Curve(a={self._a}, b={self._b}, p={self._p})"

    def point(self, x, y):
        """
        point creates an affine Point with the coordinates reduced into
        [0, p). The result is not checked for membership.
        """
        return Point(mod(x, self._p), mod(y, self._p))

    def isOnCurve(self, pt):
        """
        isOnCurve returns True if pt is the point at infinity or an affine
        point with coordinates in [0, p) satisfying y² = x³ + ax + b (mod p).
        """
        if pt.isIdentity():
            return True
        p = self._p
        x, y = pt.x, pt.y
        if not (0 <= x < p and 0 <= y < p):
            return False
        return mod(y * y, p) == mod(x ** 3 + self._a * x + self._b, p)

    def negate(self, pt):
        """
        negate returns -pt, the reflection of pt across the x axis.
        """
        if pt.isIdentity():
            return pt
        return Point(pt.x, mod(-pt.y, self._p))

    def add(self, p1, p2):
        """
        add returns p1 + p2 using the chord-and-tangent rule of [GECC]
        section 3.1.2, with the doubling case folded in.

        Both points must be on the curve. An off-curve input is a caller
        error and can surface as NoInverseError or a meaningless result.
        """
        # ∞ + P = P and P + ∞ = P.
        if p1.isIdentity():
            return p2
        if p2.isIdentity():
            return p1

        p = self._p
        x1, y1 = p1.x, p1.y
        x2, y2 = p2.x, p2.y

        if mod(x1 - x2, p) == 0:
            # Same x means either P + P or P + (-P). A point with y = 0 is its
            # own inverse, so doubling it also lands on the vertical tangent.
            if mod(y1 - y2, p) != 0 or mod(y1, p) == 0:
                return Point.identity()
            # Tangent slope m = (3x² + a) / 2y.
            m = mod((3 * x1 * x1 + self._a) * inverse(2 * y1, p), p)
        else:
            # Chord slope m = (y1 - y2) / (x1 - x2).
            m = mod((y1 - y2) * inverse(x1 - x2, p), p)

        x3 = mod(m * m - x1 - x2, p)
        y3 = mod(m * (x1 - x3) - y1, p)
        return Point(x3, y3)

    def double(self, pt):
        """
        double returns 2*pt.
        """
        return self.add(pt, pt)

    def scalarMult(self, pt, k):
        """
        scalarMult returns k*pt by left-to-right double-and-add, algorithm
        3.27 from [GECC]. The bits of k are scanned from the most significant
        down, so the cost is one doubling per bit of k plus one addition per
        set bit.

        Args:
            pt (Point): A point on the curve.
            k (int): The scalar. Must be non-negative.

        Returns:
            Point: k*pt. 0*pt is the point at infinity.

        Raises:
            InvalidScalar: If k is not a non-negative integer.
        """
        if not isinstance(k, int) or isinstance(k, bool) or k < 0:
            raise InvalidScalar(f"scalar must be a non-negative integer, got {k!r}")
        q = Point.identity()
        for i in range(k.bit_length() - 1, -1, -1):
            q = self.double(q)
            if (k >> i) & 1:
                q = self.add(q, pt)
        return q
