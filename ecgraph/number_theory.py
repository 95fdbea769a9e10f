#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions for small prime fields.

The modular square root uses the Tonelli-Shanks algorithm,
with the usual shortcuts for p = 3 mod 4 and p = 5 mod 8, see
https://en.wikipedia.org/wiki/Tonelli%E2%80%93Shanks_algorithm
"""

from typing import Tuple

from ecgraph.exceptions import ECGraphValueError


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."""

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    "Return the inverse of a (mod m); m does not have to be a prime."

    a %= m
    g, x, _ = xgcd(a, m)
    if g != 1:
        raise ECGraphValueError(f"no inverse for {a} mod {m}")
    return x % m


def legendre_symbol(a: int, p: int) -> int:
    """Return the Legendre symbol a|p using Euler's criterion.

    It is 1 if a is a non-zero square mod p, -1 if it is not,
    0 if p divides a.
    """

    ls = pow(a, (p - 1) // 2, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p); p must be an odd prime.

    The other root is p - r.
    """

    a %= p
    if a == 0:
        return 0
    if legendre_symbol(a, p) != 1:
        raise ECGraphValueError(f"no root for {a} mod {p}")

    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)
    if p % 8 == 5:
        r = pow(a, (p + 3) // 8, p)
        if r * r % p != a:
            r = r * pow(2, (p - 1) // 4, p) % p
        return r
    return _tonelli_shanks(a, p)


def _tonelli_shanks(a: int, p: int) -> int:
    # a is a non-zero quadratic residue and p = 1 mod 8

    # p - 1 = q * 2^s, q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(a, q, p)
    r = pow(a, (q + 1) // 2, p)
    while t != 1:
        # least i such that t^(2^i) = 1
        i, t2i = 0, t
        while t2i != 1:
            t2i = t2i * t2i % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p
    return r
