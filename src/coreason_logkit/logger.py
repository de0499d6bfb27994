# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

import os
import sys
import threading
from datetime import datetime
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from coreason_logkit.config import Settings
from coreason_logkit.errors import FileOpenError, SinkDispatchError, SinkError, SinkWriteError
from coreason_logkit.formatter import Arguments, Formatter, accepted_arguments
from coreason_logkit.models import STDOUT, ConsoleSink, FileSink, Level, Sink
from coreason_logkit.utils.logger import logger

# One lock per absolute file path, shared by every Logger of the process.
_file_locks: Dict[str, threading.Lock] = {}
_file_locks_guard = threading.Lock()


def _lock_for(path: str) -> threading.Lock:
    key = os.path.abspath(path)
    with _file_locks_guard:
        return _file_locks.setdefault(key, threading.Lock())


class Logger(BaseModel):
    """
    Formats every log call once per sink and writes it there.

    The sink list is fixed for the lifetime of the logger. A failing sink
    never prevents the remaining sinks from being written.
    """

    model_config = ConfigDict(frozen=True)

    formatter: Formatter = Formatter()
    sinks: Tuple[Sink, ...] = (STDOUT,)
    raise_on_error: bool = False

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Logger":
        """Builds a logger from LOGKIT_* environment settings."""
        settings = settings if settings is not None else Settings()
        formatter = Formatter(
            color_template=settings.COLOR_TEMPLATE,
            plain_template=settings.PLAIN_TEMPLATE,
            timestamp_format=settings.TIMESTAMP_FORMAT,
        )
        return cls(formatter=formatter, sinks=tuple(settings.sink_list()), raise_on_error=settings.RAISE_ON_ERROR)

    def log(self, message: str, level: Level, path: str, arguments: Arguments = ()) -> List[SinkError]:
        """
        Logs a message to every sink, in order.

        `path` identifies the call site and is added as the `path` argument
        after the caller's own arguments. Returns the failures of this call,
        an empty list when every sink was written. With `raise_on_error`
        they are raised together as a SinkDispatchError instead.
        """
        extra: List[Tuple[str, str]] = []
        for key, value in accepted_arguments(arguments):
            if key == "path":
                logger.warning("Ignoring log argument 'path': it is replaced by the call site")
                continue
            extra.append((key, value))
        extra.append(("path", path))

        now = datetime.now()
        errors: List[SinkError] = []
        for sink in self.sinks:
            text = self.formatter.format(sink, level, message, extra, now=now)
            try:
                self._write(sink, text)
            except SinkError as e:
                logger.error(f"Log record not written: {e}")
                errors.append(e)

        if errors and self.raise_on_error:
            raise SinkDispatchError(errors)
        return errors

    def _write(self, sink: Union[ConsoleSink, FileSink], text: str) -> None:
        if isinstance(sink, ConsoleSink):
            self._write_console(sink, text)
        elif isinstance(sink, FileSink):
            self._write_file(sink, text)
        else:
            raise TypeError(f"Unsupported sink: {sink!r}")

    @staticmethod
    def _write_console(sink: ConsoleSink, text: str) -> None:
        stream = sys.stdout if sink.stream == "stdout" else sys.stderr
        try:
            stream.write(text + "\n")
            stream.flush()
        except (OSError, ValueError) as e:
            # ValueError: the stream was closed
            raise SinkWriteError(sink, text, e) from e

    @staticmethod
    def _write_file(sink: FileSink, text: str) -> None:
        record = text + "\n" if sink.newline else text
        with _lock_for(sink.path):
            try:
                handle = open(sink.path, "a", encoding="utf-8")
            except (OSError, ValueError) as e:
                # ValueError: embedded NUL in the path
                raise FileOpenError(sink, text, e) from e

            try:
                with handle:
                    handle.write(record)
            except (OSError, ValueError) as e:
                # ValueError covers UnicodeEncodeError (lone surrogates)
                raise SinkWriteError(sink, text, e) from e
