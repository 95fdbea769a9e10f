#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Group law invocation for the selected points.

No arithmetic here: the curve collaborator adds the points,
tells whether they are equal (doubling) or the infinity point,
and provides the coordinates of the sum.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from dataclasses_json import DataClassJsonMixin

from ecgraph.alias import Point
from ecgraph.config import OPT_PAIR
from ecgraph.curve import CurveGroup
from ecgraph.session import InteractionSession, gate


@dataclass(frozen=True)
class AdditionResult(DataClassJsonMixin):
    """The sum of the two selected points.

    Coordinates are None for the point at infinity.
    """

    point1: Optional[Tuple[int, int]] = field(metadata=OPT_PAIR)
    point2: Optional[Tuple[int, int]] = field(metadata=OPT_PAIR)
    index1: int
    index2: int
    sum: Optional[Tuple[int, int]] = field(metadata=OPT_PAIR)
    is_same_point: bool
    point1_is_inf: bool
    point2_is_inf: bool

    @property
    def involves_infinity(self) -> bool:
        return self.point1_is_inf or self.point2_is_inf


def add_points(
    ec: CurveGroup, point1: Point, point2: Point, index1: int = 0, index2: int = 0
) -> AdditionResult:
    is_same_point = ec.equal(point1, point2)
    S = ec.add(point1, point2)
    return AdditionResult(
        point1=ec.coordinates(point1),
        point2=ec.coordinates(point2),
        index1=index1,
        index2=index2,
        sum=ec.coordinates(S),
        is_same_point=is_same_point,
        point1_is_inf=ec.is_inf(point1),
        point2_is_inf=ec.is_inf(point2),
    )


def add_selected(
    session: InteractionSession, ec: CurveGroup
) -> Optional[AdditionResult]:
    """Return the sum of the selected points, None if the gate refuses it.

    Both points are always built before adding.
    """
    points = gate(session, ec)
    if points is None:
        return None
    point1, point2 = points
    return add_points(ec, point1, point2, session.index(0), session.index(1))
