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
from typing import Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from coreason_logkit.config import DEFAULT_COLOR_TEMPLATE, DEFAULT_PLAIN_TEMPLATE, DEFAULT_TIMESTAMP_FORMAT
from coreason_logkit.models import ConsoleSink, FileSink, Level
from coreason_logkit.utils.logger import logger

_COLOR_NAMES = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]


def _build_palette() -> Dict[str, str]:
    palette = {
        # Formatting codes
        "end": "\x1b[0m",
        "bold": "\x1b[1m",
        "italic": "\x1b[3m",
        "underline": "\x1b[4m",
        "overline": "\x1b[53m",
    }
    for offset, name in enumerate(_COLOR_NAMES):
        palette[f"color.{name}"] = f"\x1b[{30 + offset}m"
    for offset, name in enumerate(_COLOR_NAMES):
        palette[f"color.bright_{name}"] = f"\x1b[{90 + offset}m"
    for offset, name in enumerate(_COLOR_NAMES):
        palette[f"back.{name}"] = f"\x1b[{40 + offset}m"
    for offset, name in enumerate(_COLOR_NAMES):
        palette[f"back.bright_{name}"] = f"\x1b[{100 + offset}m"
    return palette


PALETTE: Dict[str, str] = _build_palette()

# Keys a caller argument can never override. `path` is owned by the Logger.
RESERVED_KEYS = frozenset(["message", "timestamp", "level", "path", *PALETTE])

Arguments = Iterable[Tuple[str, str]]


def accepted_arguments(arguments: Arguments) -> List[Tuple[str, str]]:
    """
    Drops caller arguments named like a reserved key, with a warning.

    `path` passes through since the Logger supplies it as an argument.
    """
    accepted: List[Tuple[str, str]] = []
    for key, value in arguments:
        if key in RESERVED_KEYS and key != "path":
            logger.warning(f"Ignoring log argument '{key}': the name is reserved")
            continue
        accepted.append((key, value))
    return accepted


class Formatter(BaseModel):
    """
    Renders a single log record into its final text.

    Holds two templates, one for console sinks that may use the color
    palette and one plain template for every other sink, plus a strftime
    pattern for the `{{timestamp}}` key.
    """

    model_config = ConfigDict(frozen=True)

    color_template: str = DEFAULT_COLOR_TEMPLATE
    plain_template: str = DEFAULT_PLAIN_TEMPLATE
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    def timestamp(self, now: Optional[datetime] = None) -> str:
        """Formats `now` (local time by default). An unusable pattern is returned literally."""
        moment = now if now is not None else datetime.now()
        try:
            return moment.strftime(self.timestamp_format)
        except (ValueError, UnicodeError):
            return self.timestamp_format

    def template_for(self, sink: Union[ConsoleSink, FileSink]) -> str:
        return self.color_template if sink.is_console else self.plain_template

    def substitutions(
        self,
        sink: Union[ConsoleSink, FileSink],
        level: Level,
        message: str,
        arguments: Arguments = (),
        now: Optional[datetime] = None,
    ) -> List[Tuple[str, str]]:
        """
        Builds the ordered substitution table for one record.

        Order: message, timestamp, caller arguments, level, palette.
        Reserved caller arguments are dropped (see `accepted_arguments`) so
        the built-in value always wins. A repeated caller key keeps its last
        value.
        """
        table: Dict[str, str] = {
            "message": message,
            "timestamp": self.timestamp(now),
        }

        for key, value in accepted_arguments(arguments):
            table[key] = value

        table["level"] = level.colored_label if sink.is_console else level.label
        table.update(PALETTE)
        return list(table.items())

    @staticmethod
    def render(template: str, table: Iterable[Tuple[str, str]]) -> str:
        """
        Replaces every `{{key}}` token, one key at a time in table order.

        Each key is replaced exactly once, so a value is never rescanned for
        its own token. Tokens without a key are left untouched.
        """
        result = template
        for key, value in table:
            result = result.replace("{{" + key + "}}", value)
        return result

    def format(
        self,
        sink: Union[ConsoleSink, FileSink],
        level: Level,
        message: str,
        arguments: Arguments = (),
        now: Optional[datetime] = None,
    ) -> str:
        """
        Formats a message for the given sink.

        Console sinks use the color template and a colored level label,
        all other sinks the plain template. The message is substituted
        first, so tokens inside it are resolved by the caller arguments and
        the palette: "Info and {{details}}" with ("details", "more stuff")
        renders as "Info and more stuff".
        """
        table = self.substitutions(sink, level, message, arguments, now)
        return self.render(self.template_for(sink), table)
