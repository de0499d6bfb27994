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
from typing import Annotated, List, Optional, Tuple, Union

import typer

from coreason_logkit import __version__, shortcuts
from coreason_logkit.errors import SinkDispatchError
from coreason_logkit.formatter import PALETTE, Formatter
from coreason_logkit.logger import Logger
from coreason_logkit.models import STDOUT, ConsoleSink, FileSink, Level, parse_sink
from coreason_logkit.utils.logger import logger

app = typer.Typer(
    name="coreason-logkit",
    help="CLI for coreason-logkit: template-driven logging to console and files.",
    add_completion=False,
)

LevelOption = Annotated[str, typer.Option("--level", "-l", help="Log level (debug, info, warn, error, fatal, message)")]
ArgOption = Annotated[
    Optional[List[str]], typer.Option("--arg", "-a", help="Extra template value as key=value (repeatable)")
]
PathOption = Annotated[str, typer.Option("--path", "-p", help="Call site shown for {{path}}")]


def _parse_level(name: str) -> Level:
    try:
        return Level.parse(name)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--level") from e


def _parse_sink(text: str) -> Union[ConsoleSink, FileSink]:
    try:
        return parse_sink(text)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--sink") from e


def _parse_arguments(items: List[str]) -> List[Tuple[str, str]]:
    arguments = []
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {item!r}", param_hint="--arg")
        arguments.append((key, value))
    return arguments


@app.command()
def emit(
    message: Annotated[str, typer.Argument(help="Message to log")],
    level: LevelOption = "message",
    sink: Annotated[
        Optional[List[str]], typer.Option("--sink", "-s", help="Sink descriptor, overrides LOGKIT_SINKS (repeatable)")
    ] = None,
    arg: ArgOption = None,
    path: PathOption = "<cli>",
) -> None:
    """
    Log one message through a logger configured from LOGKIT_* settings.
    """
    log_level = _parse_level(level)
    arguments = _parse_arguments(arg or [])
    configured = Logger.from_settings()
    sinks = tuple(_parse_sink(s) for s in sink) if sink else configured.sinks
    target = Logger(formatter=configured.formatter, sinks=sinks, raise_on_error=True)

    try:
        target.log(message, log_level, path, arguments)
    except SinkDispatchError as e:
        logger.error(f"Emit failed for {len(e.errors)} sink(s)")
        sys.exit(1)


@app.command()
def render(
    message: Annotated[str, typer.Argument(help="Message to format")],
    level: LevelOption = "message",
    sink: Annotated[str, typer.Option("--sink", "-s", help="Sink kind selecting the template")] = "stdout",
    arg: ArgOption = None,
    path: PathOption = "<cli>",
) -> None:
    """
    Print the formatted text for one sink without writing to it.
    """
    formatter = Logger.from_settings().formatter
    arguments = _parse_arguments(arg or []) + [("path", path)]
    typer.echo(formatter.format(_parse_sink(sink), _parse_level(level), message, arguments))


@app.command()
def palette() -> None:
    """List the color and style keys available in templates."""
    for key in PALETTE:
        sample = Formatter.render("{{" + key + "}}sample{{end}}", PALETTE.items())
        typer.echo(f"{key:<22} {sample}", color=True)


@app.command()
def demo() -> None:
    """Log a message at every level, with and without extra arguments."""
    demo_logger = Logger(formatter=Logger.from_settings().formatter, sinks=(STDOUT,))

    shortcuts.debug(demo_logger, "Debug message")
    shortcuts.info(demo_logger, "Info")
    shortcuts.warn(demo_logger, "Warning")
    shortcuts.error(demo_logger, "Error!")
    shortcuts.fatal(demo_logger, "Fatal error!")
    shortcuts.log(demo_logger, "Log message")

    shortcuts.debug(demo_logger, "Debug message with {{more_info}}", more_info="additional information")
    shortcuts.info(demo_logger, "Info and {{details}}", details="more stuff")
    shortcuts.warn(demo_logger, "Warning: {{name}} is bad", name="War")
    shortcuts.error(demo_logger, "Error! {{stuff}} went wrong", stuff="Everything")
    shortcuts.fatal(demo_logger, "Fatal error! Code {{code}}", code=404)
    shortcuts.log(demo_logger, "Log message and {{more}}", more="more")


@app.command()
def version() -> None:
    """Print the version of coreason-logkit."""
    typer.echo(f"coreason-logkit v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
