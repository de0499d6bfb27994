# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

"""
coreason-logkit
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .errors import FileOpenError, LogkitError, SinkDispatchError, SinkError, SinkWriteError
from .formatter import PALETTE, RESERVED_KEYS, Formatter
from .logger import Logger
from .models import STDERR, STDOUT, ConsoleSink, FileSink, Level, Sink, parse_sink
from .shortcuts import debug, error, fatal, info, log, warn

__all__ = [
    "Formatter",
    "Logger",
    "Level",
    "ConsoleSink",
    "FileSink",
    "Sink",
    "STDOUT",
    "STDERR",
    "PALETTE",
    "RESERVED_KEYS",
    "parse_sink",
    "LogkitError",
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
