#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgraph.input` module."

from typing import List

import pytest

from ecgraph.exceptions import ECGraphRuntimeError
from ecgraph.input import Click, ReplayInput


def test_click() -> None:
    assert Click(130, 75, 30, 70).pixel == (100, 5)
    assert Click(10, 20).pixel == (10, 20)


def test_replay() -> None:
    clicks = [Click(i, i) for i in range(4)]
    source = ReplayInput(clicks)
    assert not source.connected
    # nothing to deliver to
    assert source.run() == []
    assert source.dispatch(clicks[0]) is None

    received: List[Click] = []

    def callback(click: Click) -> int:
        received.append(click)
        return int(click.client_x)

    source.connect(callback)
    assert source.connected
    assert source.run() == [0, 1, 2, 3]
    # restartable
    assert source.run() == [0, 1, 2, 3]
    assert received == clicks + clicks

    with pytest.raises(ECGraphRuntimeError, match="already connected"):
        source.connect(callback)


def test_disconnect_while_running() -> None:
    source = ReplayInput([Click(i, i) for i in range(4)])

    def callback(click: Click) -> float:
        if click.client_x == 1:
            source.disconnect()
        return click.client_x

    source.connect(callback)
    assert source.run() == [0, 1]
    assert not source.connected
    assert source.run() == []
    assert source.dispatch(Click(0, 0)) is None
    # disconnecting twice is harmless
    source.disconnect()
