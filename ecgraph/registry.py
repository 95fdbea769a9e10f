#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Drawn points registry and element id allocation.

The PointRegistry lists the curve points of a view in drawing order,
using the 1-based indexes of their surface ids (p_1, p_2, ...):
the n finite points have indexes 1..n,
the point at infinity is always the last one, with index n + 1.
The infinity point has no field coordinates:
the registry records where its marker is drawn instead.

The registry is populated once, at setup time;
it is frozen when interaction starts.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ecgraph.alias import INF, Point
from ecgraph.exceptions import ECGraphRuntimeError, ECGraphValueError

ID_KINDS = ("point", "line", "segment")


class IdAllocator:
    "Per-kind counters of drawn points, lines, and segments."

    def __init__(self) -> None:
        self._counters: Dict[str, int] = dict.fromkeys(ID_KINDS, 0)

    def _check(self, kind: str) -> None:
        if kind not in self._counters:
            raise ECGraphValueError(f"unknown id kind: {kind}")

    def next(self, kind: str) -> int:
        "Allocate and return the next id for the kind; the first one is 1."
        self._check(kind)
        self._counters[kind] += 1
        return self._counters[kind]

    def current(self, kind: str) -> int:
        "Return the last allocated id, 0 if none."
        self._check(kind)
        return self._counters[kind]

    def reset(self) -> None:
        for kind in self._counters:
            self._counters[kind] = 0


class PointRegistry:
    def __init__(self) -> None:
        self._points: List[Point] = []
        self._infinity_position: Optional[Tuple[int, int]] = None
        self._frozen = False

    def populate(
        self, points: Iterable[Point], infinity_position: Tuple[int, int]
    ) -> None:
        """Set the finite points and the infinity marker position.

        The infinity point must not be part of the finite points.
        """
        self._check_not_frozen()
        points = [(int(x), int(y)) for x, y in points]
        if INF in points:
            raise ECGraphValueError("INF is not a drawable point")
        self._points = points
        self._infinity_position = int(infinity_position[0]), int(infinity_position[1])

    def add(self, Q: Point) -> int:
        "Append a finite point and return its index."
        self._check_not_frozen()
        if self._infinity_position is None:
            raise ECGraphRuntimeError("empty registry: populate it first")
        if Q == INF:
            raise ECGraphValueError("INF is not a drawable point")
        self._points.append((int(Q[0]), int(Q[1])))
        return len(self._points)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise ECGraphRuntimeError("registry is frozen: interaction has started")

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        "Return the number of entries, the infinity point included."
        return 0 if self._infinity_position is None else len(self._points) + 1

    @property
    def points(self) -> Sequence[Point]:
        return tuple(self._points)

    @property
    def infinity_index(self) -> int:
        if self._infinity_position is None:
            raise ECGraphRuntimeError("empty registry")
        return len(self._points) + 1

    @property
    def infinity_position(self) -> Tuple[int, int]:
        if self._infinity_position is None:
            raise ECGraphRuntimeError("empty registry")
        return self._infinity_position

    def is_infinity_index(self, i: int) -> bool:
        return i == self.infinity_index

    def point(self, i: int) -> Point:
        "Return the curve point at 1-based index i."
        if self.is_infinity_index(i):
            return INF
        if not 1 <= i <= len(self._points):
            raise ECGraphValueError(f"index not in 1..{self.infinity_index}: {i}")
        return self._points[i - 1]

    def position(self, i: int) -> Tuple[int, int]:
        "Return where the point at 1-based index i is drawn."
        if self.is_infinity_index(i):
            return self.infinity_position
        return self.point(i)

    def index_of(self, coord: Tuple[int, int]) -> Optional[int]:
        "Return the first index of a finite point with the given coordinates."
        for i, Q in enumerate(self._points, 1):
            if Q == coord:
                return i
        return None
