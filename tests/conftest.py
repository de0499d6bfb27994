# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

from datetime import datetime
from pathlib import Path
from typing import Generator, List

import pytest
from loguru import logger

from coreason_logkit.formatter import Formatter
from coreason_logkit.models import FileSink


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 2, 3, 4, 5)


@pytest.fixture
def bare_formatter() -> Formatter:
    """Formatter without timestamps, so rendered records are fully predictable."""
    return Formatter(
        color_template="{{level}}|{{path}}|{{message}}",
        plain_template="{{level}}|{{path}}|{{message}}",
    )


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "out.log"


@pytest.fixture
def file_sink(log_file: Path) -> FileSink:
    return FileSink(path=str(log_file))


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Collects diagnostics emitted through loguru at WARNING and above."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clean_logkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    names = ("SINKS", "COLOR_TEMPLATE", "PLAIN_TEMPLATE", "TIMESTAMP_FORMAT", "RAISE_ON_ERROR", "DIAGNOSTICS_LEVEL")
    for name in names:
        monkeypatch.delenv(f"LOGKIT_{name}", raising=False)
