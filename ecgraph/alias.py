#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coordinate conventions.
"""

from typing import Optional, Tuple, Union

# Elliptic curve point in affine coordinates over Fp.
Point = Tuple[int, int]

# Low cardinality curves are not of prime order:
# points with y == 0 are legitimate group elements of order two,
# so the infinity point cannot be encoded as (int, 0).
# INF is the only point with negative coordinates.
# It can be checked with 'Q == INF'
INF: Point = -1, -1

# A point as stored in a selection slot:
# absent coordinates (None, None) stand for the infinity point
OptCoord = Tuple[Optional[int], Optional[int]]

# Coordinates in the field (math) space of the drawing surface,
# not yet rounded to the field grid
FieldCoord = Tuple[float, float]

# Coordinates in the pixel space of the drawing surface
PixelCoord = Tuple[float, float]

# Either an int or a float, e.g. a parameter value read back from the surface
Number = Union[int, float]
