#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgraph.presenter` module."

from ecgraph.alias import INF
from ecgraph.config import GraphConfig
from ecgraph.curve import CurveGroup
from ecgraph.invoker import add_points
from ecgraph.presenter import (
    INFINITY_ID,
    MODULO_ID,
    SELECTED_IDS,
    SUM_ID,
    ResultPresenter,
)
from ecgraph.surface import MemorySurface

ec = CurveGroup(13, 7, 6)
cfg = GraphConfig()


def _presenter() -> ResultPresenter:
    return ResultPresenter(MemorySurface(), ec.p, (6, 16), cfg)


def test_addition() -> None:
    presenter = _presenter()
    surface = presenter.surface
    presenter.present(add_points(ec, (1, 1), (10, 6)))

    assert set(surface.ids()) == {MODULO_ID, SUM_ID, *SELECTED_IDS}
    modulo = surface.element(MODULO_ID)
    assert modulo is not None
    assert modulo.label == "mod 13"
    assert modulo.kind == "text"

    S = surface.element(SUM_ID)
    assert S is not None
    assert S.position == (6, 2)
    assert S.label == "P + Q = (6, 2)"
    assert S.color == cfg.colors.final_point
    assert S.point_style == "POINT"

    selected = [surface.element(id_) for id_ in SELECTED_IDS]
    assert [e.position for e in selected if e] == [(1, 1), (10, 6)]


def test_doubling() -> None:
    presenter = _presenter()
    surface = presenter.surface
    presenter.present(add_points(ec, (1, 1), (1, 1)))

    S = surface.element(SUM_ID)
    assert S is not None
    assert S.position == (10, 6)
    assert S.label == "2P = (10, 6)"
    assert S.color == cfg.colors.doubling_point
    assert S.point_style == "CROSS"
    assert INFINITY_ID not in surface


def test_infinity() -> None:
    presenter = _presenter()
    surface = presenter.surface

    # opposite points: the sum is drawn on the infinity marker
    presenter.present(add_points(ec, (1, 1), (1, 12)))
    S = surface.element(SUM_ID)
    assert S is not None
    assert S.position == (6, 16)
    assert S.label == "P + Q = Infinity"
    assert INFINITY_ID not in surface

    presenter.present(add_points(ec, INF, (5, 6)))
    S = surface.element(SUM_ID)
    assert S is not None
    assert S.position == (5, 6)
    marker = surface.element(INFINITY_ID)
    assert marker is not None
    assert marker.position == (6, 16)
    assert marker.label == "Infinity"
    selected = surface.element(SELECTED_IDS[0])
    assert selected is not None
    assert selected.position == (6, 16)


def test_idempotency() -> None:
    presenter = _presenter()
    surface = presenter.surface
    result = add_points(ec, INF, (1, 1))
    presenter.present(result)
    state = surface.get_state()
    n = len(surface)

    presenter.present(result)
    assert len(surface) == n
    assert surface.get_state() == state
