#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Click input sources.

An InputSource delivers Clicks, one at a time,
to the single callback connected to it.
Disconnecting is permanent for that callback:
clicks arriving afterwards are dropped.

ReplayInput replays a finite sequence of clicks and can be restarted,
ecgraph.mpl.MatplotlibInput listens to a matplotlib canvas.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

from ecgraph.alias import PixelCoord
from ecgraph.exceptions import ECGraphRuntimeError


@dataclass(frozen=True)
class Click:
    """A pointer click.

    client_x and client_y are viewport-relative,
    left and top locate the surface rectangle in the viewport.
    """

    client_x: float
    client_y: float
    left: float = 0.0
    top: float = 0.0

    @property
    def pixel(self) -> PixelCoord:
        "Return the click position in the surface pixel space."
        return self.client_x - self.left, self.client_y - self.top


ClickCallback = Callable[[Click], Any]


class InputSource(ABC):
    def __init__(self) -> None:
        self._callback: Optional[ClickCallback] = None

    @property
    def connected(self) -> bool:
        return self._callback is not None

    def connect(self, callback: ClickCallback) -> None:
        if self._callback is not None:
            raise ECGraphRuntimeError("a click listener is already connected")
        self._callback = callback
        self._on_connect()

    def disconnect(self) -> None:
        if self._callback is not None:
            self._callback = None
            self._on_disconnect()

    def dispatch(self, click: Click) -> Any:
        "Deliver a click to the connected callback, if any."
        if self._callback is None:
            return None
        return self._callback(click)

    @abstractmethod
    def _on_connect(self) -> None:
        ...

    @abstractmethod
    def _on_disconnect(self) -> None:
        ...


class ReplayInput(InputSource):
    """Finite and restartable sequence of clicks.

    Each run() delivers the whole sequence from the start
    and returns what the callback returned for each delivered click.
    """

    def __init__(self, clicks: Iterable[Click] = ()) -> None:
        super().__init__()
        self.clicks: List[Click] = list(clicks)

    def _on_connect(self) -> None:
        pass

    def _on_disconnect(self) -> None:
        pass

    def run(self) -> List[Any]:
        results = []
        for click in self.clicks:
            if not self.connected:
                break
            results.append(self.dispatch(click))
        return results
