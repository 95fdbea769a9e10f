#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgraph.surface` module."

import json
import logging

import pytest

from ecgraph.exceptions import ECGraphValueError
from ecgraph.surface import Bounds, Element, MemorySurface


def test_element() -> None:
    P = Element("point", [1], [2], label="P")
    assert P.xs == (1,)
    assert P.position == (1, 2)
    assert P == Element("point", (1,), (2,), label="P")

    assert Element.from_json(P.to_json()) == P
    segment = Element("segment", (0, 1, 2), (0, 1, 0), line_style="DASHED")
    assert Element.from_dict(json.loads(segment.to_json())) == segment

    with pytest.raises(ECGraphValueError, match="unknown element kind: "):
        Element("circle", (0,), (0,))
    err_msg = "mismatch between number of x and y coordinates: "
    with pytest.raises(ECGraphValueError, match=err_msg):
        Element("segment", (0, 1), (0,))
    with pytest.raises(ECGraphValueError, match="a point needs exactly one vertex"):
        Element("point", (0, 1), (0, 1))
    with pytest.raises(ECGraphValueError, match="a line needs exactly two vertices"):
        Element("line", (0,), (0,))
    with pytest.raises(ECGraphValueError, match="unknown point style: "):
        Element("point", (0,), (0,), point_style="STAR")
    with pytest.raises(ECGraphValueError, match="unknown line style: "):
        Element("segment", (0,), (0,), line_style="WAVY")
    with pytest.raises(ECGraphValueError, match="unknown drag mode: "):
        Element("point", (0,), (0,), drag_mode="Z")


def test_bounds() -> None:
    Bounds(-0.5, 13.5, -0.5, 20)
    with pytest.raises(ECGraphValueError, match="empty bounds: "):
        Bounds(1, 1, 0, 1)
    with pytest.raises(ECGraphValueError, match="empty bounds: "):
        Bounds(0, 1, 2, 1)


def test_transforms() -> None:
    surface = MemorySurface(200, 100, Bounds(0, 20, -5, 5))
    assert surface.pixel_to_field(0, 0) == (0, 5)
    assert surface.pixel_to_field(200, 100) == (20, -5)
    assert surface.pixel_to_field(100, 50) == (10, 0)
    assert surface.field_to_pixel(10, 0) == (100, 50)
    assert surface.field_to_pixel(0, 5) == (0, 0)
    for px, py in ((13, 17), (150.5, 99), (0.25, 3)):
        x, y = surface.pixel_to_field(px, py)
        assert surface.field_to_pixel(x, y) == pytest.approx((px, py))

    surface.set_bounds(Bounds(-0.5, 13.5, -0.5, 20))
    assert surface.pixel_to_field(0, 0) == (-0.5, 20)

    with pytest.raises(ECGraphValueError, match="invalid pixel size: "):
        MemorySurface(0, 100)


def test_upsert_is_idempotent() -> None:
    surface = MemorySurface()
    P = Element("point", (1,), (1,))
    assert surface.upsert("p_1", P) == "p_1"
    surface.upsert("p_1", P)
    assert surface.ids() == ["p_1"]
    assert len(surface) == 1
    assert "p_1" in surface
    assert surface.history == [("p_1", P), ("p_1", P)]

    Q = Element("point", (2,), (3,))
    surface.upsert("p_1", Q)
    assert surface.element("p_1") == Q
    assert len(surface) == 1
    assert surface.element("p_2") is None


def test_update(caplog: pytest.LogCaptureFixture) -> None:
    surface = MemorySurface()
    surface.upsert("p_1", Element("point", (1,), (1,)))
    new = surface.update("p_1", label="Infinity", show_label=True)
    assert new is not None
    assert new.label == "Infinity"
    assert surface.element("p_1") == new

    with caplog.at_level(logging.WARNING, logger="ecgraph.surface"):
        assert surface.update("p_9", hidden=True) is None
    assert "id: p_9 does not exist." in caplog.text
    assert "p_9" not in surface


def test_values_and_state() -> None:
    surface = MemorySurface()
    surface.set_value("x_1", 3)
    assert surface.value("x_1") == 3
    with pytest.raises(ECGraphValueError, match="unknown parameter: "):
        surface.value("y_1")

    surface.upsert("p_1", Element("point", (3,), (4,), label="p_1"))
    surface.upsert("s_1", Element("segment", (0, 1), (0, 1)))
    state = surface.get_state()
    json.dumps(state)

    surface.remove("s_1")
    surface.remove("s_9")
    assert surface.ids() == ["p_1"]

    surface.clear()
    assert len(surface) == 0
    with pytest.raises(ECGraphValueError, match="unknown parameter: "):
        surface.value("x_1")

    surface.set_state(state)
    assert surface.ids() == ["p_1", "s_1"]
    assert surface.element("p_1") == Element("point", (3,), (4,), label="p_1")
    assert surface.value("x_1") == 3
    assert surface.get_state() == state
