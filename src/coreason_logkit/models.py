# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

from enum import IntEnum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

_LABELS = {
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARN": "WARNING",
    "ERROR": "ERROR",
    "FATAL": "FATAL",
    "MESSAGE": "MESSAGE",
}

_COLORED_LABELS = {
    "DEBUG": "DEBUG",
    "INFO": "{{color.blue}}INFO{{end}}",
    "WARN": "{{color.yellow}}WARNING{{end}}",
    "ERROR": "{{color.red}}ERROR{{end}}",
    "FATAL": "{{color.red}}FATAL{{end}}",
    "MESSAGE": "{{color.blue}}MESSAGE{{end}}",
}


class Level(IntEnum):
    """
    Log level attached to a log call.

    Levels only select the display label and its console color. Every call
    is rendered and dispatched whatever its level.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    MESSAGE = 5

    @classmethod
    def default(cls) -> "Level":
        return cls.DEBUG

    @classmethod
    def parse(cls, name: str) -> "Level":
        """Looks a level up by member name or display label, ignoring case."""
        key = name.strip().upper()
        for level in cls:
            if key in (level.name, level.label):
                return level
        raise ValueError(f"Unknown log level: {name!r}")

    @property
    def label(self) -> str:
        return _LABELS[self.name]

    @property
    def colored_label(self) -> str:
        """Console label, wrapped in color placeholders and closed with {{end}}."""
        return _COLORED_LABELS[self.name]


class ConsoleSink(BaseModel):
    """Standard output or standard error of the current process."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["console"] = "console"
    stream: Literal["stdout", "stderr"] = "stdout"

    @property
    def is_console(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.stream


class FileSink(BaseModel):
    """
    A file opened in append mode for every single log call.

    The rendered text is written as is. Set `newline` to terminate each
    record with a line break.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: str
    newline: bool = False

    @property
    def is_console(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"file:{self.path}"


# Tagged by the `kind` literal of each variant
Sink = Union[ConsoleSink, FileSink]

STDOUT = ConsoleSink(stream="stdout")
STDERR = ConsoleSink(stream="stderr")


def parse_sink(text: str) -> Union[ConsoleSink, FileSink]:
    """
    Parses a textual sink descriptor.

    Accepted forms: `stdout`, `stderr`, `file:<path>` and `file+nl:<path>`
    (the latter appends a newline after every record).
    """
    value = text.strip()
    lowered = value.lower()
    if lowered == "stdout":
        return STDOUT
    if lowered == "stderr":
        return STDERR

    scheme, sep, path = value.partition(":")
    if sep and path:
        if scheme.lower() == "file":
            return FileSink(path=path)
        if scheme.lower() == "file+nl":
            return FileSink(path=path, newline=True)

    raise ValueError(f"Invalid sink descriptor: {text!r} (expected stdout, stderr, file:<path> or file+nl:<path>)")
