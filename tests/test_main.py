#!/usr/bin/env python3

# Copyright (C) 2021-2022 The ecgraph developers
#
# This file is part of ecgraph. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgraph including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgraph.__main__` command line."

from pathlib import Path

import pytest

from ecgraph.__main__ import _parser, main


def test_parser() -> None:
    args = _parser().parse_args(["23", "5", "1"])
    assert (args.p, args.a, args.b) == (23, 5, 1)
    assert args.config is None
    assert args.failure_policy is None
    assert args.log_level == "WARNING"

    argv = ["13", "7", "6", "--failure-policy", "retry", "--log-level", "debug"]
    args = _parser().parse_args(argv)
    assert args.failure_policy == "retry"
    assert args.log_level == "DEBUG"

    with pytest.raises(SystemExit):
        _parser().parse_args(["13", "7", "6", "--failure-policy", "ignore"])
    with pytest.raises(SystemExit):
        _parser().parse_args(["13", "7"])
    with pytest.raises(SystemExit):
        _parser().parse_args(["13", "7", "6", "--log-level", "verbose"])


def test_invalid_curve(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["15", "1", "1"])
    assert exc_info.value.code == 2
    assert "p is not prime: 15" in capsys.readouterr().err

    with pytest.raises(SystemExit):
        main(["13", "7", "13"])
    assert "p <= b: 13 <= 13" in capsys.readouterr().err


def test_invalid_config(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    filename = tmp_path / "ecgraph.json"
    filename.write_text('{"infinity_position": [1, 2, 3]}', encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["13", "7", "6", "--config", str(filename)])
    assert "not a coordinates pair: " in capsys.readouterr().err

    with pytest.raises(SystemExit):
        main(["13", "7", "6", "--config", str(tmp_path / "missing.json")])
