#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These only discriminate between Exceptions raised by ecgraph
(e.g. malformed arguments while drawing points, lines, and segments)
from those raised by other codebase (e.g. the plotting backend).

Callers are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecgraph versions are derived.
"""


class ECGraphValueError(ValueError):
    pass


class ECGraphTypeError(TypeError):
    pass


class ECGraphRuntimeError(RuntimeError):
    pass
