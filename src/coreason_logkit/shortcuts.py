# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

from typing import Any, Dict, List

from coreason_logkit.callsite import caller_path
from coreason_logkit.errors import SinkError
from coreason_logkit.logger import Logger
from coreason_logkit.models import Level

__all__ = ["debug", "info", "warn", "error", "fatal", "log"]


def _emit(logger: Logger, level: Level, message: str, arguments: Dict[str, Any]) -> List[SinkError]:
    # Frames: _emit -> level helper -> caller
    path = caller_path(depth=2)
    return logger.log(message, level, path, [(key, str(value)) for key, value in arguments.items()])


def debug(logger: Logger, message: str, /, **arguments: Any) -> List[SinkError]:
    """Logs `message` at DEBUG. Keyword arguments fill `{{name}}` tokens."""
    return _emit(logger, Level.DEBUG, message, arguments)


def info(logger: Logger, message: str, /, **arguments: Any) -> List[SinkError]:
    return _emit(logger, Level.INFO, message, arguments)


def warn(logger: Logger, message: str, /, **arguments: Any) -> List[SinkError]:
    return _emit(logger, Level.WARN, message, arguments)


def error(logger: Logger, message: str, /, **arguments: Any) -> List[SinkError]:
    return _emit(logger, Level.ERROR, message, arguments)


def fatal(logger: Logger, message: str, /, **arguments: Any) -> List[SinkError]:
    """Logs `message` at FATAL. Only the label changes: the process keeps running."""
    return _emit(logger, Level.FATAL, message, arguments)


def log(logger: Logger, message: str, /, **arguments: Any) -> List[SinkError]:
    """Logs `message` at MESSAGE level."""
    return _emit(logger, Level.MESSAGE, message, arguments)
