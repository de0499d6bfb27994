# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

import sys
from typing import Any

from loguru import logger as _logger

from coreason_logkit.config import Settings

__all__ = ["logger"]

# Remove default handler
_logger.remove()

# Diagnostics of the library itself (dropped arguments, failing sinks, CLI progress).
# Records written through a coreason_logkit.Logger never pass through here.
# Threshold: LOGKIT_DIAGNOSTICS_LEVEL (default INFO).
_logger.add(
    sys.stderr,
    level=Settings().DIAGNOSTICS_LEVEL,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

logger: Any = _logger
