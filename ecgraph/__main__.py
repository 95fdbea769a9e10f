#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Interactive explorer of the addition law on a small modular curve.

    python -m ecgraph 23 5 1

draws the points of y^2 = x^3 + 5x + 1 over F_23:
click two points (or the infinity point) to see their sum.
Requires the 'plot' extra (matplotlib).
"""

import argparse
import logging
from typing import List, Optional

from ecgraph.config import FailurePolicy, GraphConfig
from ecgraph.curve import CurveGroup


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecgraph", description="Elliptic curve point addition over Fp"
    )
    parser.add_argument("p", type=int, help="field order (an odd prime)")
    parser.add_argument("a", type=int, help="curve coefficient a, in 0..p-1")
    parser.add_argument("b", type=int, help="curve coefficient b, in 0..p-1")
    parser.add_argument("--config", help="json configuration file")
    parser.add_argument(
        "--failure-policy",
        choices=[policy.value for policy in FailurePolicy],
        help="what to do when handling a click fails",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(asctime)s [%(levelname)s] %(message)s"
    )
    try:
        cfg = GraphConfig.load(args.config) if args.config else GraphConfig()
        if args.failure_policy:
            cfg.failure_policy = FailurePolicy(args.failure_policy)
        ec = CurveGroup(args.p, args.a, args.b)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    import matplotlib.pyplot as plt

    from ecgraph.mpl import MatplotlibInput, MatplotlibSurface
    from ecgraph.view import ModularCurveView

    surface = MatplotlibSurface()
    view = ModularCurveView(surface, ec, cfg)
    view.display_points()
    view.add_click_points(MatplotlibInput(surface.ax.figure.canvas))
    logging.getLogger(__name__).info("%s, %d points", repr(ec), ec.order())
    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
