#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Drawing configuration.

GraphConfig gathers the knobs of a curve view:
colors, modular grid appearance, infinity marker position,
and the policy applied when click handling fails.
It is a json-serializable dataclass, so that it can be
stored next to a curve definition, e.g.

    {
        "colors": {"final_point": "#ff0000"},
        "grid_opacity": 0.4,
        "failure_policy": "disable"
    }
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple, Type, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from ecgraph.exceptions import ECGraphValueError


def _pair_or_none(v: Optional[Sequence[int]]) -> Optional[Tuple[int, int]]:
    if v is None:
        return None
    if len(v) != 2:
        raise ECGraphValueError(f"not a coordinates pair: {v}")
    return int(v[0]), int(v[1])


# field metadata for optional coordinates pairs, decoded as tuples
OPT_PAIR = config(decoder=_pair_or_none)


class FailurePolicy(Enum):
    """What to do when the click handling sequence raises.

    DISABLE: permanently disconnect the click listener
    RETRY: keep listening, the next click is handled as usual
    RAISE: disconnect the click listener, then propagate the error
    """

    DISABLE = "disable"
    RETRY = "retry"
    RAISE = "raise"


@dataclass
class Colors(DataClassJsonMixin):
    curve: str = "#eb9671"
    point: str = "#2c3e50"
    line: str = "#000000"
    segment: str = "#2d70b3"
    final_point: str = "#ff0000"
    doubling_point: str = "#9b30ff"
    infinity: str = "#388c46"
    selected: str = "#fa7e19"


_Config = TypeVar("_Config", bound="GraphConfig")


@dataclass
class GraphConfig(DataClassJsonMixin):
    colors: Colors = field(default_factory=Colors)
    # modular grid rows
    grid_opacity: float = 0.4
    grid_size: int = 6
    point_size: int = 9
    result_size: int = 14
    show_labels: bool = True
    # None means the default position above the p x p grid
    infinity_position: Optional[Tuple[int, int]] = field(default=None, metadata=OPT_PAIR)
    failure_policy: FailurePolicy = FailurePolicy.DISABLE

    def __post_init__(self) -> None:
        self.assert_valid()

    def assert_valid(self) -> None:
        if not 0 <= self.grid_opacity <= 1:
            raise ECGraphValueError(f"grid opacity not in [0, 1]: {self.grid_opacity}")
        if self.grid_size <= 0:
            raise ECGraphValueError(f"non positive grid size: {self.grid_size}")
        if self.point_size <= 0:
            raise ECGraphValueError(f"non positive point size: {self.point_size}")
        if self.result_size <= 0:
            raise ECGraphValueError(f"non positive result size: {self.result_size}")
        if self.infinity_position is not None and len(self.infinity_position) != 2:
            err_msg = f"infinity position must be a pair: {self.infinity_position}"
            raise ECGraphValueError(err_msg)

    def infinity_marker(self, p: int) -> Tuple[int, int]:
        "Return where the infinity point is drawn for a field of order p."
        if self.infinity_position is not None:
            return self.infinity_position
        # above the p x p grid, inside the [-0.5, 1.5 p + 0.5] vertical bounds
        return p // 2, (5 * p) // 4

    @classmethod
    def load(cls: Type[_Config], path: str) -> _Config:
        "Return a GraphConfig from a json file."
        with open(path, "r", encoding="utf-8") as file_:
            return cls.from_json(file_.read())
