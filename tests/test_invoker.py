#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgraph.invoker` module."

from typing import List, Tuple

from ecgraph.alias import INF, Point
from ecgraph.curve import CurveGroup
from ecgraph.invoker import AdditionResult, add_points, add_selected
from ecgraph.session import EMPTY, InteractionSession, Match

ec = CurveGroup(13, 7, 6)


class RecordingCurve(CurveGroup):
    "Collaborator keeping track of the additions it is asked for."

    def __init__(self, p: int, a: int, b: int) -> None:
        super().__init__(p, a, b)
        self.calls: List[Tuple[Point, Point]] = []

    def add(self, Q1: Point, Q2: Point) -> Point:
        self.calls.append((Q1, Q2))
        return super().add(Q1, Q2)


def test_add_points() -> None:
    result = add_points(ec, (1, 1), (10, 6), 1, 7)
    assert result == AdditionResult(
        point1=(1, 1),
        point2=(10, 6),
        index1=1,
        index2=7,
        sum=(6, 2),
        is_same_point=False,
        point1_is_inf=False,
        point2_is_inf=False,
    )
    assert not result.involves_infinity

    result = add_points(ec, (1, 1), (1, 1))
    assert result.is_same_point
    assert result.sum == ec.add((1, 1), (1, 1)) == (10, 6)

    result = add_points(ec, (1, 1), (1, 12))
    assert not result.is_same_point
    assert result.sum is None

    result = add_points(ec, INF, INF)
    assert result.is_same_point
    assert result.involves_infinity
    assert result.point1 is None
    assert result.sum is None


def test_add_selected() -> None:
    ec2 = RecordingCurve(13, 7, 6)
    session = InteractionSession()
    session.select(Match((1, 1), 1))

    result = add_selected(session, ec2)
    assert result is not None
    assert ec2.calls == [((1, 1), INF)]
    assert result.sum == (1, 1)
    assert result.point2_is_inf
    assert (result.index1, result.index2) == (1, 0)

    session.select(Match((1, 1), 1))
    result = add_selected(session, ec2)
    assert result is not None
    assert result.is_same_point
    assert result.sum == (10, 6)
    assert (result.index1, result.index2) == (1, 1)

    session.select(Match(EMPTY, 11))
    result = add_selected(session, ec2)
    assert result is not None
    assert result.point1_is_inf
    assert result.sum == (1, 1)


def test_json() -> None:
    result = add_points(ec, (1, 1), (10, 6), 1, 7)
    assert AdditionResult.from_json(result.to_json()) == result
    assert tuple(result.to_dict()["sum"]) == (6, 2)

    result = add_points(ec, INF, (1, 1), 11, 1)
    assert AdditionResult.from_dict(result.to_dict()) == result
