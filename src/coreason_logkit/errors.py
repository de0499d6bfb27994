# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

from typing import List, Optional, Union

from coreason_logkit.models import ConsoleSink, FileSink


class LogkitError(Exception):
    """Base class for coreason-logkit errors."""


class SinkError(LogkitError):
    """
    A sink could not receive a rendered record.

    Carries the sink, the text that was not written and the underlying error.
    """

    reason = "Sink error"

    def __init__(self, sink: Union[ConsoleSink, FileSink], text: str, cause: Optional[BaseException] = None):
        self.sink = sink
        self.text = text
        self.cause = cause
        super().__init__(f"{self.reason} ({sink}): {cause}")


class FileOpenError(SinkError):
    """The file could not be opened for appending."""

    reason = "The file could not be opened"


class SinkWriteError(SinkError):
    """The sink was reachable but writing (or closing) it failed."""

    reason = "The sink could not be written"


class SinkDispatchError(LogkitError):
    """Raised after a log call when one or more sinks failed."""

    def __init__(self, errors: List[SinkError]):
        self.errors = errors
        details = "; ".join(str(error) for error in errors)
        super().__init__(f"{len(errors)} sink(s) failed: {details}")
