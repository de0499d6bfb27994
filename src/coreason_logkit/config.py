# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

from typing import List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coreason_logkit.models import ConsoleSink, FileSink, parse_sink

DEFAULT_COLOR_TEMPLATE = "[{{color.bright_blue}}{{timestamp}}{{end}}] [{{level}}] {{path}}: {{message}}"
DEFAULT_PLAIN_TEMPLATE = "[{{timestamp}}] [{{level}}] {{path}}: {{message}}"
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

DIAGNOSTICS_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Logger settings loaded from LOGKIT_* environment variables.
    """

    # Formatting
    COLOR_TEMPLATE: str = DEFAULT_COLOR_TEMPLATE
    PLAIN_TEMPLATE: str = DEFAULT_PLAIN_TEMPLATE
    TIMESTAMP_FORMAT: str = DEFAULT_TIMESTAMP_FORMAT  # strftime

    # Dispatch
    SINKS: str = "stdout"  # comma separated: stdout, stderr, file:<path>, file+nl:<path>
    RAISE_ON_ERROR: bool = False

    # Library diagnostics (loguru, stderr)
    DIAGNOSTICS_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LOGKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("DIAGNOSTICS_LEVEL")
    @classmethod
    def _check_diagnostics_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in DIAGNOSTICS_LEVELS:
            raise ValueError(f"Unknown diagnostics level: {value!r}")
        return level

    def sink_list(self) -> List[Union[ConsoleSink, FileSink]]:
        return [parse_sink(part) for part in self.SINKS.split(",") if part.strip()]

