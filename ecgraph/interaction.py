#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Click handling for modular curve views.

Each click goes through a single failure scope:
pixel to field conversion, resolution against the registry,
slot selection, gate check, addition, and presentation.

Whatever is raised in there is handed to the FailurePolicy.
The default policy permanently disconnects the click listener:
from then on clicks have no effect at all on the view.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ecgraph.alias import FieldCoord
from ecgraph.config import FailurePolicy
from ecgraph.curve import CurveGroup
from ecgraph.input import Click, InputSource
from ecgraph.invoker import AdditionResult, add_selected
from ecgraph.presenter import ResultPresenter
from ecgraph.registry import PointRegistry
from ecgraph.session import InteractionSession, Match, resolve

logger = logging.getLogger(__name__)


class OutcomeKind(Enum):
    # the gate refused to add the selected points
    GATED = "gated"
    # an addition has been computed and presented
    COMPUTED = "computed"
    # something raised while handling the click
    FAILED = "failed"
    # the handler was disabled by a previous failure
    DISABLED = "disabled"


@dataclass(frozen=True)
class ClickOutcome:
    kind: OutcomeKind
    match: Optional[Match] = None
    result: Optional[AdditionResult] = None
    error: Optional[Exception] = None

    @property
    def selected(self) -> bool:
        return self.match is not None


class ClickHandler:
    """Callback turning clicks into additions.

    The session is owned by the handler:
    nothing else writes its slots.
    """

    def __init__(
        self,
        ec: CurveGroup,
        registry: PointRegistry,
        presenter: ResultPresenter,
        session: Optional[InteractionSession] = None,
        source: Optional[InputSource] = None,
        policy: FailurePolicy = FailurePolicy.DISABLE,
    ) -> None:
        self.ec = ec
        self.registry = registry
        self.presenter = presenter
        self.session = session or InteractionSession()
        self.source = source
        self.policy = policy
        self.disabled = False

    def __call__(self, click: Click) -> ClickOutcome:
        if self.disabled:
            return ClickOutcome(OutcomeKind.DISABLED)
        match = None
        try:
            coord = self.presenter.surface.pixel_to_field(*click.pixel)
            match = resolve(coord, self.registry)
            return self._handle(match)
        except Exception as e:
            return self._fail(e, match)

    def handle_coordinate(self, coord: FieldCoord) -> ClickOutcome:
        """Handle an already converted field coordinate.

        Same failure scope as a click.
        """
        if self.disabled:
            return ClickOutcome(OutcomeKind.DISABLED)
        match = None
        try:
            match = resolve(coord, self.registry)
            return self._handle(match)
        except Exception as e:
            return self._fail(e, match)

    def _handle(self, match: Optional[Match]) -> ClickOutcome:
        # a miss leaves the slots untouched,
        # but the current selection is still checked and presented
        self.session.select(match)
        result = add_selected(self.session, self.ec)
        if result is None:
            return ClickOutcome(OutcomeKind.GATED, match)
        self.presenter.present(result)
        return ClickOutcome(OutcomeKind.COMPUTED, match, result)

    def disable(self) -> None:
        "Permanently remove the click listener."
        self.disabled = True
        if self.source is not None:
            self.source.disconnect()

    def _fail(self, error: Exception, match: Optional[Match]) -> ClickOutcome:
        if self.policy is FailurePolicy.RETRY:
            logger.warning("click handling failed: %s", error, exc_info=error)
            return ClickOutcome(OutcomeKind.FAILED, match, error=error)

        logger.error(
            "click handling failed, point selection disabled: %s",
            error,
            exc_info=error,
        )
        self.disable()
        if self.policy is FailurePolicy.RAISE:
            raise error
        return ClickOutcome(OutcomeKind.FAILED, match, error=error)
