#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgraph.number_theory` module."

import pytest

from ecgraph.exceptions import ECGraphValueError
from ecgraph.number_theory import legendre_symbol, mod_inv, mod_sqrt, xgcd

# 3 mod 4, 5 mod 8, and 1 mod 8 primes
primes = [3, 5, 7, 11, 13, 17, 19, 23, 29, 41, 73, 97, 9739]


def test_xgcd() -> None:
    assert xgcd(240, 46) == (2, -9, 47)
    g, x, y = xgcd(13, 7)
    assert g == 1
    assert 13 * x + 7 * y == 1


def test_mod_inv() -> None:
    for p in primes:
        for a in range(1, min(p, 200)):
            assert a * mod_inv(a, p) % p == 1
            assert mod_inv(a + p, p) == mod_inv(a, p)

    # m does not have to be a prime
    assert mod_inv(7, 12) == 7

    with pytest.raises(ECGraphValueError, match="no inverse for "):
        mod_inv(0, 13)
    with pytest.raises(ECGraphValueError, match="no inverse for "):
        mod_inv(4, 12)


def test_legendre_symbol() -> None:
    assert legendre_symbol(0, 13) == 0
    squares = {x * x % 13 for x in range(1, 13)}
    for a in range(1, 13):
        assert legendre_symbol(a, 13) == (1 if a in squares else -1)


def test_mod_sqrt() -> None:
    for p in primes:
        squares = {x * x % p for x in range(p)}
        for a in range(min(p, 300)):
            if a in squares:
                r = mod_sqrt(a, p)
                assert r * r % p == a
                assert (p - r) * (p - r) % p == a
            else:
                with pytest.raises(ECGraphValueError, match="no root for "):
                    mod_sqrt(a, p)

    assert mod_sqrt(0, 17) == 0
    # 1 mod 8 prime: Tonelli-Shanks
    assert mod_sqrt(2, 17) in (6, 11)
    # 5 mod 8 prime
    assert mod_sqrt(10, 13) in (6, 7)
