#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve views.

CurveView provides the drawing operations shared by all views:
points (p_i, with x_i and y_i parameters), lines (l_i, with g_i and b_i),
and dashed segments (s_i). Ids are allocated in drawing order.

Each kind of curve then implements the CurveViewBehavior interface:

* RealCurveView draws y^2 = x^3 + a*x + b over the reals
* ModularCurveView draws the points of a CurveGroup over Fp
  and lets the user add them by clicking
"""

import math
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ecgraph.alias import Number, Point
from ecgraph.config import FailurePolicy, GraphConfig
from ecgraph.curve import CurveGroup
from ecgraph.exceptions import (
    ECGraphRuntimeError,
    ECGraphTypeError,
    ECGraphValueError,
)
from ecgraph.input import InputSource
from ecgraph.interaction import ClickHandler
from ecgraph.presenter import ResultPresenter
from ecgraph.registry import IdAllocator, PointRegistry
from ecgraph.surface import DRAG_MODES, Bounds, Element, RenderingSurface


def _is_number(v: Any) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)


def _is_pair(P: Any) -> bool:
    return isinstance(P, (list, tuple)) and len(P) == 2 and all(map(_is_number, P))


class CurveViewBehavior(ABC):
    "What a curve-specific view must provide."

    @abstractmethod
    def show_curve(self) -> None:
        "Draw the curve."

    @abstractmethod
    def add_curve_point(self, x: Number) -> List[int]:
        "Add the curve point(s) with the given abscissa, returning their ids."


class CurveView:
    def __init__(
        self, surface: RenderingSurface, cfg: Optional[GraphConfig] = None
    ) -> None:
        self.surface = surface
        self.cfg = cfg or GraphConfig()
        self.ids = IdAllocator()
        self._saved_state: Optional[Dict[str, Any]] = None

    # state

    def save_state(self) -> None:
        "Save the current drawing; load_state brings it back."
        self._saved_state = {
            "surface": self.surface.get_state(),
            "ids": {k: self.ids.current(k) for k in ("point", "line", "segment")},
        }

    def load_state(self) -> None:
        if self._saved_state is None:
            raise ECGraphRuntimeError("no saved state")
        self.surface.set_state(self._saved_state["surface"])
        self.ids.reset()
        for kind, n in self._saved_state["ids"].items():
            for _ in range(n):
                self.ids.next(kind)

    def set_blank(self) -> None:
        "Erase everything, restarting ids from 1."
        self.ids.reset()
        self.surface.clear()

    def set_expression_parameters(self, id_: str, **params: Any) -> Optional[str]:
        """Change some fields of a drawn element, e.g. label or color.

        Unknown ids are logged as a warning and otherwise ignored.
        """
        if self.surface.update(id_, **params) is None:
            return None
        return id_

    def value_of(self, param: str) -> Number:
        "Return the current value of a parameter, e.g. 'x_3' or 'g_1'."
        return self.surface.value(param)

    # points

    def add_draggable_point(self, P: Sequence[Number], axis: str) -> int:
        """Add a point, draggable along the given axis; return its id.

        axis is one of 'X', 'Y', 'XY', or 'NONE'.
        """
        if not _is_pair(P):
            raise ECGraphTypeError(f"wrong inputs: 'P' must be a pair of numbers: {P}")
        if axis not in DRAG_MODES:
            err_msg = "wrong inputs: 'axis' must be either 'X', 'Y', 'XY', or 'NONE'"
            raise ECGraphValueError(err_msg)

        i = self.ids.next("point")
        self.surface.set_value(f"x_{i}", P[0])
        self.surface.set_value(f"y_{i}", P[1])
        self.surface.upsert(
            f"p_{i}",
            Element(
                "point",
                (P[0],),
                (P[1],),
                label=f"p_{i}",
                show_label=self.cfg.show_labels,
                color=self.cfg.colors.point,
                size=self.cfg.point_size,
                drag_mode=axis,
            ),
        )
        return i

    def add_static_point(self, P: Sequence[Number]) -> int:
        return self.add_draggable_point(P, "NONE")

    def _check_id(self, kind: str, i: Any) -> None:
        if not isinstance(i, int) or isinstance(i, bool):
            raise ECGraphTypeError(f"wrong inputs: {kind} id must be an int: {i}")
        n = self.ids.current(kind)
        if not 1 <= i <= n:
            err_msg = f"selected {kind}: {i} does not exist. "
            err_msg += f"Number of {kind}s: {n}"
            raise ECGraphValueError(err_msg)

    def update_point(self, i: int, P: Sequence[Number]) -> None:
        self._check_id("point", i)
        if not _is_pair(P):
            raise ECGraphTypeError(f"wrong inputs: 'P' must be a pair of numbers: {P}")
        self.surface.set_value(f"x_{i}", P[0])
        self.surface.set_value(f"y_{i}", P[1])
        self.surface.update(f"p_{i}", xs=(P[0],), ys=(P[1],))

    # lines and segments

    def _upsert_line(
        self,
        i: int,
        xs: Tuple[Number, Number],
        ys: Tuple[Number, Number],
        **kwargs: Any,
    ) -> None:
        self.surface.upsert(
            f"l_{i}", Element("line", xs, ys, color=self.cfg.colors.line, **kwargs)
        )

    def add_line(self, gradient: Number, b: Number) -> int:
        "Add the line y = gradient * x + b; return its id."
        if not _is_number(gradient) or not _is_number(b):
            raise ECGraphTypeError("wrong inputs: 'gradient' and 'b' must be numbers")
        i = self.ids.next("line")
        self.surface.set_value(f"g_{i}", gradient)
        self.surface.set_value(f"b_{i}", b)
        self._upsert_line(i, (0, 1), (b, gradient + b))
        return i

    def update_line(self, i: int, gradient: Number, b: Number) -> None:
        self._check_id("line", i)
        if not _is_number(gradient) or not _is_number(b):
            raise ECGraphTypeError("wrong inputs: 'gradient' and 'b' must be numbers")
        self.surface.set_value(f"g_{i}", gradient)
        self.surface.set_value(f"b_{i}", b)
        self.surface.update(f"l_{i}", xs=(0, 1), ys=(b, gradient + b))

    def add_line_between_two_points(self, idP: int, idQ: int) -> int:
        "Add the line through two drawn points; return its id."
        self._check_id("point", idP)
        self._check_id("point", idQ)
        P = self.value_of(f"x_{idP}"), self.value_of(f"y_{idP}")
        Q = self.value_of(f"x_{idQ}"), self.value_of(f"y_{idQ}")
        if P == Q:
            raise ECGraphValueError(f"no line through coincident points: {idP}, {idQ}")

        i = self.ids.next("line")
        n = P[1] - Q[1]
        d = P[0] - Q[0]
        # vertical lines have no gradient
        if d != 0:
            self.surface.set_value(f"g_{i}", n / d)
        self._upsert_line(i, (P[0], Q[0]), (P[1], Q[1]), opacity=0.3)
        return i

    def add_segment(
        self, coordinates_x: Sequence[Number], coordinates_y: Sequence[Number]
    ) -> int:
        "Add a dashed polyline through the given vertices; return its id."
        if not isinstance(coordinates_x, (list, tuple)) or not isinstance(
            coordinates_y, (list, tuple)
        ):
            err_msg = "'coordinates_x' and 'coordinates_y' must be sequences. "
            err_msg += f"Given: {type(coordinates_x).__name__} "
            err_msg += f"and {type(coordinates_y).__name__}"
            raise ECGraphTypeError(err_msg)
        if len(coordinates_x) != len(coordinates_y):
            err_msg = "mismatch between number of x and y coordinates: "
            err_msg += f"{len(coordinates_x)} vs {len(coordinates_y)}"
            raise ECGraphValueError(err_msg)

        i = self.ids.next("segment")
        self.surface.upsert(
            f"s_{i}",
            Element(
                "segment",
                tuple(coordinates_x),
                tuple(coordinates_y),
                color=self.cfg.colors.segment,
                point_style="OPEN",
                line_style="DASHED",
            ),
        )
        return i

    # visibility

    def _show(self, prefix: str, kind: str, **changes: Any) -> None:
        for i in range(1, self.ids.current(kind) + 1):
            self.surface.update(f"{prefix}_{i}", **changes)

    def show_lines(self, visible: bool) -> None:
        self._show("l", "line", hidden=not visible)

    def show_labels(self, visible: bool) -> None:
        self._show("p", "point", show_label=visible)

    def show_segments(self, visible: bool) -> None:
        self._show("s", "segment", hidden=not visible)


class RealCurveView(CurveView, CurveViewBehavior):
    """Curve y^2 = x^3 + a*x + b over the reals.

    The curve is sampled across the horizontal bounds:
    each connected component is drawn as a single path,
    going right along the upper branch and back along the lower one.
    """

    def __init__(
        self,
        surface: RenderingSurface,
        a: Number,
        b: Number,
        cfg: Optional[GraphConfig] = None,
        samples: int = 2000,
    ) -> None:
        super().__init__(surface, cfg)
        if not _is_number(a) or not _is_number(b):
            raise ECGraphTypeError("wrong inputs: 'a' and 'b' must be numbers")
        if 4 * a * a * a + 27 * b * b == 0:
            raise ECGraphValueError("zero discriminant")
        if samples < 2:
            raise ECGraphValueError(f"too few samples: {samples}")
        self.a = a
        self.b = b
        self.samples = samples
        self.components = 0

    def _y2(self, x: float) -> float:
        return (x * x + self.a) * x + self.b

    def _runs(self) -> List[List[float]]:
        "Return the runs of sampled abscissas where y^2 >= 0."
        left, right = self.surface.bounds.left, self.surface.bounds.right
        step = (right - left) / (self.samples - 1)
        runs: List[List[float]] = []
        previous = False
        for k in range(self.samples):
            x = left + k * step
            inside = self._y2(x) >= 0
            if inside and not previous:
                runs.append([])
            if inside:
                runs[-1].append(x)
            previous = inside
        return runs

    def show_curve(self) -> None:
        for k in range(1, self.components + 1):
            self.surface.remove(f"curve_{k}")
        runs = self._runs()
        for k, run in enumerate(runs, 1):
            upper = [math.sqrt(self._y2(x)) for x in run]
            xs = run + run[::-1]
            ys = upper + [-y for y in upper[::-1]]
            self.surface.upsert(
                f"curve_{k}", Element("curve", xs, ys, color=self.cfg.colors.curve)
            )
        self.components = len(runs)

    def add_curve_point(self, x: Number) -> List[int]:
        "Add the point on the upper branch, draggable along the x axis."
        if not _is_number(x):
            raise ECGraphTypeError(f"wrong inputs: 'x' must be a number: {x}")
        y2 = self._y2(x)
        if y2 < 0:
            raise ECGraphValueError(f"no curve point with x = {x}")
        return [self.add_draggable_point((x, math.sqrt(y2)), "X")]


class ModularCurveView(CurveView, CurveViewBehavior):
    """Points of a CurveGroup drawn on the p x p grid.

    The registry lists the points to be drawn (all the group points
    by default); display_points draws them as p_1, ..., p_n,
    followed by the infinity point p_{n+1} above the grid.
    """

    def __init__(
        self,
        surface: RenderingSurface,
        ec: CurveGroup,
        cfg: Optional[GraphConfig] = None,
    ) -> None:
        super().__init__(surface, cfg)
        self.ec = ec
        self.registry = PointRegistry()
        self.handler: Optional[ClickHandler] = None
        self._draw_frame()

    def _draw_frame(self) -> None:
        p = self.ec.p
        self.surface.set_bounds(Bounds(-0.5, p + 0.5, -0.5, p * 1.5 + 0.5))
        self.surface.upsert(
            "border",
            Element(
                "polygon", (0, p, p, 0), (0, 0, p, p), color=self.cfg.colors.line
            ),
        )

    def set_blank(self) -> None:
        super().set_blank()
        self._draw_frame()

    def populate(self, points: Optional[Sequence[Point]] = None) -> None:
        """Set the points to be drawn, all the group points by default.

        It must happen before interaction starts.
        """
        if points is None:
            points = self.ec.points()
        for Q in points:
            self.ec.require_on_curve(Q)
        self.registry.populate(points, self.cfg.infinity_marker(self.ec.p))

    def add_curve_point(self, x: Number) -> List[int]:
        "Register the group points with the given abscissa, returning their indexes."
        if not _is_number(x):
            raise ECGraphTypeError(f"wrong inputs: 'x' must be a number: {x}")
        if len(self.registry) == 0:
            self.populate([])
        y = self.ec.y(int(x))
        ys = sorted({y, (self.ec.p - y) % self.ec.p})
        return [self.registry.add((int(x), y)) for y in ys]

    def display_points(self) -> None:
        "Draw the registered points, the infinity point, and the grid."
        if self.ids.current("point"):
            raise ECGraphRuntimeError("points already drawn: use set_blank first")
        if len(self.registry) == 0:
            self.populate()
        for Q in self.registry.points:
            self.add_static_point(Q)
        i = self.add_static_point(self.registry.infinity_position)
        self.set_expression_parameters(f"p_{i}", label="Infinity", show_label=True)

        p = self.ec.p
        for row in range(p):
            self.surface.upsert(
                f"q_{row}",
                Element(
                    "grid",
                    tuple(range(p)),
                    (row,) * p,
                    color=self.cfg.colors.point,
                    size=self.cfg.grid_size,
                    opacity=self.cfg.grid_opacity,
                ),
            )

    def show_curve(self) -> None:
        self.display_points()

    def add_click_points(
        self, source: InputSource, policy: Optional[FailurePolicy] = None
    ) -> ClickHandler:
        """Let the user add points by clicking them.

        Clicks alternately fill two selection slots;
        the sum of the selected points is drawn after each click.
        """
        if self.handler is not None:
            raise ECGraphRuntimeError("click points already enabled")
        if len(self.registry) == 0:
            self.populate()
        self.registry.freeze()
        presenter = ResultPresenter(
            self.surface, self.ec.p, self.registry.infinity_position, self.cfg
        )
        self.handler = ClickHandler(
            self.ec,
            self.registry,
            presenter,
            source=source,
            policy=policy or self.cfg.failure_policy,
        )
        source.connect(self.handler)
        return self.handler
