# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

import coreason_logkit


def test_public_api_exposure() -> None:
    """
    Verify that the core classes and level helpers are exposed at the package level.
    """
    expected_symbols = [
        "Formatter",
        "Logger",
        "Level",
        "ConsoleSink",
        "FileSink",
        "STDOUT",
        "STDERR",
        "parse_sink",
        "SinkError",
        "FileOpenError",
        "SinkWriteError",
        "SinkDispatchError",
        "debug",
        "info",
        "warn",
        "error",
        "fatal",
        "log",
    ]

    for symbol in expected_symbols:
        assert hasattr(coreason_logkit, symbol), f"{symbol} not exposed in coreason_logkit"


def test_level_helpers_callable() -> None:
    for name in ("debug", "info", "warn", "error", "fatal", "log"):
        assert callable(getattr(coreason_logkit, name))


def test_error_hierarchy() -> None:
    assert issubclass(coreason_logkit.FileOpenError, coreason_logkit.SinkError)
    assert issubclass(coreason_logkit.SinkWriteError, coreason_logkit.SinkError)
    assert issubclass(coreason_logkit.SinkDispatchError, coreason_logkit.LogkitError)
