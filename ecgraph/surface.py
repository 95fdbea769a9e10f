#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Rendering surfaces.

A RenderingSurface is where curve views draw:
it converts between pixel and field (math) coordinates
and keeps a set of visual Elements indexed by id.
Drawing is always an upsert: issuing the same id twice
updates the existing element, it never duplicates it.

It also keeps named numeric parameters (e.g. 'x_3'),
which can be read back by id.

MemorySurface is the headless implementation,
ecgraph.mpl.MatplotlibSurface draws on a matplotlib Axes.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from dataclasses_json import DataClassJsonMixin, config

from ecgraph.alias import FieldCoord, Number, PixelCoord
from ecgraph.exceptions import ECGraphValueError

logger = logging.getLogger(__name__)

KINDS = ("point", "text", "line", "segment", "polygon", "grid", "curve")
POINT_STYLES = ("POINT", "OPEN", "CROSS")
LINE_STYLES = ("SOLID", "DASHED", "DOTTED")
DRAG_MODES = ("NONE", "X", "Y", "XY")


@dataclass(frozen=True)
class Element(DataClassJsonMixin):
    """A visual item of the surface.

    xs and ys are the field coordinates of its vertices:
    one for a point or a text, two for an (infinite) line,
    one or more for segments, polygons, grids, and curves.
    """

    kind: str
    xs: Tuple[float, ...] = field(default=(), metadata=config(decoder=tuple))
    ys: Tuple[float, ...] = field(default=(), metadata=config(decoder=tuple))
    label: Optional[str] = None
    show_label: bool = False
    color: str = "#000000"
    size: float = 9
    opacity: float = 1.0
    point_style: str = "POINT"
    line_style: str = "SOLID"
    drag_mode: str = "NONE"
    hidden: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "xs", tuple(self.xs))
        object.__setattr__(self, "ys", tuple(self.ys))
        self.assert_valid()

    def assert_valid(self) -> None:
        if self.kind not in KINDS:
            raise ECGraphValueError(f"unknown element kind: {self.kind}")
        if len(self.xs) != len(self.ys):
            err_msg = "mismatch between number of x and y coordinates: "
            err_msg += f"{len(self.xs)} vs {len(self.ys)}"
            raise ECGraphValueError(err_msg)
        if self.kind in ("point", "text") and len(self.xs) != 1:
            raise ECGraphValueError(f"a {self.kind} needs exactly one vertex")
        if self.kind == "line" and len(self.xs) != 2:
            raise ECGraphValueError("a line needs exactly two vertices")
        if self.point_style not in POINT_STYLES:
            raise ECGraphValueError(f"unknown point style: {self.point_style}")
        if self.line_style not in LINE_STYLES:
            raise ECGraphValueError(f"unknown line style: {self.line_style}")
        if self.drag_mode not in DRAG_MODES:
            raise ECGraphValueError(f"unknown drag mode: {self.drag_mode}")

    @property
    def position(self) -> FieldCoord:
        "Return the first vertex."
        return self.xs[0], self.ys[0]


@dataclass(frozen=True)
class Bounds(DataClassJsonMixin):
    left: float = -10.0
    right: float = 10.0
    bottom: float = -10.0
    top: float = 10.0

    def __post_init__(self) -> None:
        if self.left >= self.right or self.bottom >= self.top:
            raise ECGraphValueError(f"empty bounds: {self}")


class RenderingSurface(ABC):
    """Abstract drawing surface: coordinate transforms and element store."""

    def __init__(self, bounds: Optional[Bounds] = None) -> None:
        self._elements: Dict[str, Element] = {}
        self._values: Dict[str, Number] = {}
        self.bounds = bounds or Bounds()

    # coordinate transforms

    @abstractmethod
    def pixel_to_field(self, px: float, py: float) -> FieldCoord:
        ...

    @abstractmethod
    def field_to_pixel(self, x: float, y: float) -> PixelCoord:
        ...

    # backend hooks

    @abstractmethod
    def _render(self, id_: str, element: Element) -> None:
        "Draw the element, replacing what was previously drawn for id_."

    @abstractmethod
    def _erase(self, id_: str) -> None:
        "Remove whatever was drawn for id_."

    def _apply_bounds(self) -> None:
        pass

    # element store

    def upsert(self, id_: str, element: Element) -> str:
        "Draw a new element or replace the one with the same id."
        self._elements[id_] = element
        self._render(id_, element)
        return id_

    def update(self, id_: str, **changes: Any) -> Optional[Element]:
        """Change some fields of an existing element.

        Unknown ids are logged as a warning and otherwise ignored.
        """
        old = self._elements.get(id_)
        if old is None:
            logger.warning("id: %s does not exist.", id_)
            return None
        new = replace(old, **changes)
        self.upsert(id_, new)
        return new

    def element(self, id_: str) -> Optional[Element]:
        return self._elements.get(id_)

    def ids(self) -> List[str]:
        return list(self._elements)

    def remove(self, id_: str) -> None:
        if self._elements.pop(id_, None) is not None:
            self._erase(id_)

    def __contains__(self, id_: object) -> bool:
        return id_ in self._elements

    def __len__(self) -> int:
        return len(self._elements)

    # named parameters

    def set_value(self, name: str, value: Number) -> None:
        self._values[name] = value

    def value(self, name: str) -> Number:
        "Return the current value of a named parameter, e.g. 'x_3'."
        try:
            return self._values[name]
        except KeyError:
            raise ECGraphValueError(f"unknown parameter: {name}") from None

    # whole surface

    def set_bounds(self, bounds: Bounds) -> None:
        self.bounds = bounds
        self._apply_bounds()

    def clear(self) -> None:
        for id_ in list(self._elements):
            self.remove(id_)
        self._values.clear()

    def get_state(self) -> Dict[str, Any]:
        "Return a json-serializable snapshot of elements and parameters."
        return {
            "bounds": self.bounds.to_dict(),
            "elements": {k: v.to_dict() for k, v in self._elements.items()},
            "values": dict(self._values),
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        "Restore a snapshot taken with get_state."
        self.clear()
        self.set_bounds(Bounds.from_dict(state["bounds"]))
        self._values.update(state["values"])
        for id_, dict_ in state["elements"].items():
            self.upsert(id_, Element.from_dict(dict_))


class MemorySurface(RenderingSurface):
    """Headless surface of width x height pixels.

    Pixel coordinates have their origin in the top-left corner,
    with the vertical axis pointing down;
    the visible field window is given by the bounds.
    Every draw call is recorded in history.
    """

    def __init__(
        self, width: int = 600, height: int = 600, bounds: Optional[Bounds] = None
    ) -> None:
        if width <= 0 or height <= 0:
            raise ECGraphValueError(f"invalid pixel size: {width} x {height}")
        super().__init__(bounds)
        self.width = width
        self.height = height
        self.history: List[Tuple[str, Element]] = []

    def pixel_to_field(self, px: float, py: float) -> FieldCoord:
        b = self.bounds
        x = b.left + px * (b.right - b.left) / self.width
        y = b.top - py * (b.top - b.bottom) / self.height
        return x, y

    def field_to_pixel(self, x: float, y: float) -> PixelCoord:
        b = self.bounds
        px = (x - b.left) * self.width / (b.right - b.left)
        py = (b.top - y) * self.height / (b.top - b.bottom)
        return px, py

    def _render(self, id_: str, element: Element) -> None:
        self.history.append((id_, element))

    def _erase(self, id_: str) -> None:
        pass
