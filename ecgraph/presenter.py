#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Presentation of addition results on a rendering surface."

from typing import Optional, Tuple

from ecgraph.config import GraphConfig
from ecgraph.invoker import AdditionResult
from ecgraph.surface import Element, RenderingSurface

MODULO_ID = "modulo"
SUM_ID = "sum"
INFINITY_ID = "infinity"
SELECTED_IDS = ("selected_1", "selected_2")


def _str_coord(coord: Optional[Tuple[int, int]]) -> str:
    return "Infinity" if coord is None else f"({coord[0]}, {coord[1]})"


class ResultPresenter:
    """Draw the outcome of an addition.

    Every element has a fixed id, so presenting
    the same result twice leaves the surface unchanged.
    """

    def __init__(
        self,
        surface: RenderingSurface,
        p: int,
        infinity_position: Tuple[int, int],
        cfg: Optional[GraphConfig] = None,
    ) -> None:
        self.surface = surface
        self.p = p
        self.infinity_position = infinity_position
        self.cfg = cfg or GraphConfig()

    def _position(self, coord: Optional[Tuple[int, int]]) -> Tuple[int, int]:
        return self.infinity_position if coord is None else coord

    def display_modulo(self) -> None:
        self.surface.upsert(
            MODULO_ID,
            Element(
                "text",
                (self.p,),
                ((3 * self.p) // 2,),
                label=f"mod {self.p}",
                show_label=True,
                color=self.cfg.colors.line,
            ),
        )

    def display_selection(self, result: AdditionResult) -> None:
        "Circle the two added points."
        for id_, coord in zip(SELECTED_IDS, (result.point1, result.point2)):
            x, y = self._position(coord)
            self.surface.upsert(
                id_,
                Element(
                    "point",
                    (x,),
                    (y,),
                    color=self.cfg.colors.selected,
                    size=self.cfg.result_size,
                    point_style="OPEN",
                ),
            )

    def display_sum(self, result: AdditionResult) -> None:
        x, y = self._position(result.sum)
        if result.is_same_point:
            label = f"2P = {_str_coord(result.sum)}"
            color = self.cfg.colors.doubling_point
            style = "CROSS"
        else:
            label = f"P + Q = {_str_coord(result.sum)}"
            color = self.cfg.colors.final_point
            style = "POINT"
        self.surface.upsert(
            SUM_ID,
            Element(
                "point",
                (x,),
                (y,),
                label=label,
                show_label=True,
                color=color,
                size=self.cfg.result_size,
                point_style=style,
            ),
        )

    def display_infinity(self) -> None:
        x, y = self.infinity_position
        self.surface.upsert(
            INFINITY_ID,
            Element(
                "point",
                (x,),
                (y,),
                label="Infinity",
                show_label=True,
                color=self.cfg.colors.infinity,
                size=self.cfg.result_size,
                point_style="OPEN",
            ),
        )

    def present(self, result: AdditionResult) -> None:
        self.display_modulo()
        self.display_selection(result)
        self.display_sum(result)
        if result.involves_infinity:
            self.display_infinity()
