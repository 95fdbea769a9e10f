#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Point selection state machine.

A click, converted to field coordinates, is rounded to the field grid
and resolved against the PointRegistry:
it matches either the first finite point with exactly those coordinates,
or the point at infinity if it falls in the ±0.5 box
around the infinity marker (the latter wins if both apply).

An InteractionSession holds two selection slots
and a toggle telling which slot the next match fills.
Slots hold coordinates and registry indexes, not curve points:
the points to be added are built again by gate() at every check.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ecgraph.alias import FieldCoord, OptCoord, Point
from ecgraph.curve import CurveGroup
from ecgraph.registry import PointRegistry

EMPTY: OptCoord = None, None

# half side of the box around the infinity marker
INFINITY_TOLERANCE = 0.5


def round_half_up(v: float) -> int:
    "Round to the nearest integer, halves going up."
    return math.floor(v + 0.5)


def round_coordinate(coord: FieldCoord) -> Tuple[int, int]:
    "Round each axis independently to the nearest integer."
    return round_half_up(coord[0]), round_half_up(coord[1])


@dataclass(frozen=True)
class Match:
    """A click resolved to a registry entry.

    coord is (None, None) for the point at infinity.
    """

    coord: OptCoord
    index: int

    @property
    def is_infinity(self) -> bool:
        return self.coord[0] is None


def in_infinity_box(coord: Tuple[int, int], marker: Tuple[int, int]) -> bool:
    x, y = coord
    return (
        marker[0] - INFINITY_TOLERANCE <= x <= marker[0] + INFINITY_TOLERANCE
        and marker[1] - INFINITY_TOLERANCE <= y <= marker[1] + INFINITY_TOLERANCE
    )


def resolve(coord: FieldCoord, registry: PointRegistry) -> Optional[Match]:
    """Return the registry entry selected by a click, None if there is none.

    The click field coordinates are rounded first.
    """
    rounded = round_coordinate(coord)

    match = None
    index = registry.index_of(rounded)
    if index is not None:
        match = Match(rounded, index)

    if in_infinity_box(rounded, registry.infinity_position):
        match = Match(EMPTY, registry.infinity_index)

    return match


@dataclass
class InteractionSession:
    "Two alternating selection slots."

    slots: List[Optional[Match]] = field(default_factory=lambda: [None, None])
    # index of the slot to be filled by the next match
    toggle: int = 0

    def select(self, match: Optional[Match]) -> bool:
        """Fill the current slot and flip the toggle.

        A missing match leaves the session untouched.
        Return True if the session changed.
        """
        if match is None:
            return False
        self.slots[self.toggle] = match
        self.toggle = 1 - self.toggle
        return True

    def coord(self, i: int) -> OptCoord:
        "Return the coordinates in slot i, (None, None) if empty."
        slot = self.slots[i]
        return EMPTY if slot is None else slot.coord

    def index(self, i: int) -> int:
        "Return the registry index in slot i, 0 if empty."
        slot = self.slots[i]
        return 0 if slot is None else slot.index

    def reset(self) -> None:
        self.slots = [None, None]
        self.toggle = 0


def gate(session: InteractionSession, ec: CurveGroup) -> Optional[Tuple[Point, Point]]:
    """Return the two points to be added, None if addition must not happen.

    Both points are built from the slot coordinates,
    absent coordinates standing for the infinity point.
    When the second slot has no x-coordinate (empty or infinity)
    the addition is refused only if the second point
    is not built as the infinity point.
    """
    point1 = ec.point(*session.coord(0))
    point2 = ec.point(*session.coord(1))

    if session.coord(1)[0] is None and not ec.is_inf(point2):
        return None

    return point1, point2
