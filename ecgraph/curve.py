#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup over a small prime field.

The group is the set of points (x, y)
that are solutions to the Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with the point at infinity INF.
The constants a, b must satisfy the relationship
4 a^3 + 27 b^2 ≠ 0.

The group does not have to be cyclic, nor of prime order:
it is meant to be drawn on a p x p grid, for didactical reason only.

Besides the group law, CurveGroup exposes the small interface
used by the interactive views:
point, is_inf, equal, add, and coordinates.
"""

from typing import List, Optional, Tuple

from ecgraph.alias import INF, Point
from ecgraph.exceptions import ECGraphTypeError, ECGraphValueError
from ecgraph.number_theory import legendre_symbol, mod_inv, mod_sqrt

MAX_P = 10000


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp."""

    def __init__(self, p: int, a: int, b: int) -> None:

        # 1) check that p is an odd prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise ECGraphValueError(f"p is not prime: {p}")
        self.p = p

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise ECGraphValueError(f"negative a: {a}")
        if p <= a:
            raise ECGraphValueError(f"p <= a: {p} <= {a}")
        if b < 0:
            raise ECGraphValueError(f"negative b: {b}")
        if p <= b:
            raise ECGraphValueError(f"p <= b: {p} <= {b}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise ECGraphValueError("zero discriminant")
        self._a = a
        self._b = b

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        return f"Curve\n p   = {self.p}\n a   = {self._a}\n b   = {self._b}"

    def __repr__(self) -> str:
        return f"CurveGroup({self.p}, {self._a}, {self._b})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurveGroup):
            return NotImplemented
        return (self.p, self._a, self._b) == (other.p, other.a, other.b)

    def __hash__(self) -> int:
        return hash((self.p, self._a, self._b))

    # group law

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if len(Q) != 2:
            raise ECGraphTypeError("not a point")
        if Q == INF:
            return INF
        return Q[0], (self.p - Q[1]) % self.p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if R == INF:
            return Q
        if Q == INF:
            return R

        if R[0] == Q[0]:
            if R[1] == Q[1]:  # point doubling
                return self.double_aff(R)
            # opposite points
            return INF

        lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        # points of order two have a vertical tangent
        if Q == INF or Q[1] == 0:
            return INF

        lam = (3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], self.p)
        x = lam * lam - Q[0] - Q[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def _y2(self, x: int) -> int:
        # no check that y2 is a square: keep it private
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            raise ECGraphValueError(f"x-coordinate not in 0..p-1: {x}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except ECGraphValueError as e:
            raise ECGraphValueError(f"invalid x-coordinate: {x}") from e

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise ECGraphValueError("point must be a tuple[int, int]")
        if Q == INF:
            return True
        if not 0 <= Q[0] < self.p or not 0 <= Q[1] < self.p:
            raise ECGraphValueError(f"coordinates not in 0..p-1: {Q}")
        return self._y2(Q[0]) == Q[1] * Q[1] % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECGraphValueError(f"point not on curve: {Q}")

    def points(self) -> List[Point]:
        """Return all the finite group points, ordered by x then y.

        Very unsofisticated walk-through approach,
        for didactical sake only.
        """
        if self.p > MAX_P:
            raise ECGraphValueError(f"p is too big to list all group points: {self.p}")

        points: List[Point] = []
        for x in range(self.p):
            y2 = self._y2(x)
            if y2 == 0:
                points.append((x, 0))
            elif legendre_symbol(y2, self.p) == 1:
                y = mod_sqrt(y2, self.p)
                points.extend(sorted([(x, y), (x, self.p - y)]))
        return points

    def order(self) -> int:
        "Return the number of points in the group, INF included."
        return len(self.points()) + 1

    # interface consumed by the interactive views

    def point(self, x: Optional[int] = None, y: Optional[int] = None) -> Point:
        """Return the curve point with the given coordinates.

        Absent coordinates denote the infinity point.
        """
        if x is None and y is None:
            return INF
        if x is None or y is None:
            raise ECGraphTypeError(f"half-given coordinates: ({x}, {y})")
        Q = int(x), int(y)
        self.require_on_curve(Q)
        return Q

    @staticmethod
    def is_inf(Q: Point) -> bool:
        return Q == INF

    @staticmethod
    def equal(Q: Point, R: Point) -> bool:
        return tuple(Q) == tuple(R)

    @staticmethod
    def coordinates(Q: Point) -> Optional[Tuple[int, int]]:
        "Return the affine coordinates, None for the infinity point."
        return None if Q == INF else Q
