#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Matplotlib rendering surface and click input.

Requires the 'plot' extra (matplotlib).

Click pixel coordinates have their origin in the top-left corner,
as in a browser viewport, while matplotlib display coordinates
have it in the bottom-left corner: the conversion happens here.
"""

from typing import Dict, List, Optional

from matplotlib.axes import Axes
from matplotlib.backend_bases import FigureCanvasBase, MouseEvent

from ecgraph.alias import FieldCoord, PixelCoord
from ecgraph.input import Click, InputSource
from ecgraph.surface import Bounds, Element, RenderingSurface

MARKERS = {"POINT": "o", "OPEN": "o", "CROSS": "X"}
LINE_STYLES = {"SOLID": "-", "DASHED": "--", "DOTTED": ":"}


class MatplotlibSurface(RenderingSurface):
    def __init__(self, ax: Optional[Axes] = None, bounds: Optional[Bounds] = None):
        if ax is None:
            import matplotlib.pyplot as plt

            _, ax = plt.subplots(figsize=(8, 10))
        super().__init__(bounds)
        self.ax = ax
        self.ax.set_aspect("equal", adjustable="box")
        self.ax.set_axis_off()
        self._artists: Dict[str, List] = {}
        self._apply_bounds()

    @property
    def _height(self) -> float:
        return self.ax.figure.bbox.height

    def pixel_to_field(self, px: float, py: float) -> FieldCoord:
        x, y = self.ax.transData.inverted().transform((px, self._height - py))
        return float(x), float(y)

    def field_to_pixel(self, x: float, y: float) -> PixelCoord:
        px, py = self.ax.transData.transform((x, y))
        return float(px), self._height - float(py)

    def _apply_bounds(self) -> None:
        self.ax.set_xlim(self.bounds.left, self.bounds.right)
        self.ax.set_ylim(self.bounds.bottom, self.bounds.top)

    def _erase(self, id_: str) -> None:
        for artist in self._artists.pop(id_, []):
            artist.remove()

    def _render(self, id_: str, element: Element) -> None:
        self._erase(id_)
        if element.hidden:
            self._artists[id_] = []
            return

        ax = self.ax
        style = dict(color=element.color, alpha=element.opacity)
        if element.kind in ("point", "grid"):
            artists = ax.plot(
                element.xs,
                element.ys,
                linestyle="none",
                marker=MARKERS[element.point_style],
                markersize=element.size,
                markerfacecolor="none" if element.point_style == "OPEN" else None,
                **style,
            )
        elif element.kind == "text":
            artists = [ax.text(*element.position, element.label or "", **style)]
        elif element.kind == "line":
            P = element.xs[0], element.ys[0]
            Q = element.xs[1], element.ys[1]
            artists = [
                ax.axline(P, Q, linestyle=LINE_STYLES[element.line_style], **style)
            ]
        else:
            xs, ys = list(element.xs), list(element.ys)
            if element.kind == "polygon" and xs:
                xs.append(xs[0])
                ys.append(ys[0])
            artists = ax.plot(
                xs, ys, linestyle=LINE_STYLES[element.line_style], **style
            )

        if element.show_label and element.label and element.kind != "text":
            artists.append(
                ax.annotate(
                    element.label,
                    element.position,
                    xytext=(4, 4),
                    textcoords="offset points",
                    color=element.color,
                )
            )
        self._artists[id_] = list(artists)
        ax.figure.canvas.draw_idle()


class MatplotlibInput(InputSource):
    "Mouse button presses on a matplotlib canvas."

    def __init__(self, canvas: FigureCanvasBase) -> None:
        super().__init__()
        self.canvas = canvas
        self._cid: Optional[int] = None

    def _on_connect(self) -> None:
        self._cid = self.canvas.mpl_connect("button_press_event", self._on_press)

    def _on_disconnect(self) -> None:
        if self._cid is not None:
            self.canvas.mpl_disconnect(self._cid)
            self._cid = None

    def _on_press(self, event: MouseEvent) -> None:
        height = self.canvas.figure.bbox.height
        self.dispatch(Click(event.x, height - event.y))
