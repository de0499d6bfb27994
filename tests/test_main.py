# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logkit

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from coreason_logkit import __version__
from coreason_logkit.main import app, main

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"coreason-logkit v{__version__}" in result.output


def test_emit_to_stdout() -> None:
    result = runner.invoke(app, ["emit", "hello", "--path", "cli.py"])
    assert result.exit_code == 0
    assert "\x1b[34mMESSAGE\x1b[0m] cli.py: hello" in result.output


def test_emit_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "cli.log"
    result = runner.invoke(
        app,
        ["emit", "hello {{who}}", "--sink", f"file:{log_file}", "--level", "info", "--arg", "who=world", "-p", "x.py"],
    )

    assert result.exit_code == 0
    assert result.output == ""
    assert log_file.read_text(encoding="utf-8").endswith("] [INFO] x.py: hello world")


def test_emit_uses_configured_sinks(tmp_path: Path, monkeypatch) -> None:  # type: ignore
    log_file = tmp_path / "env.log"
    monkeypatch.setenv("LOGKIT_SINKS", f"file+nl:{log_file}")
    monkeypatch.setenv("LOGKIT_PLAIN_TEMPLATE", "{{level}} {{message}}")

    result = runner.invoke(app, ["emit", "configured", "--level", "error"])

    assert result.exit_code == 0
    assert log_file.read_text(encoding="utf-8") == "ERROR configured\n"


def test_emit_sink_failure_exits_nonzero(tmp_path: Path) -> None:
    bad = tmp_path / "missing" / "cli.log"
    result = runner.invoke(app, ["emit", "lost", "--sink", f"file:{bad}", "--sink", "stdout"])

    assert result.exit_code == 1
    # Remaining sinks are still written
    assert "lost" in result.output


def test_emit_invalid_argument() -> None:
    result = runner.invoke(app, ["emit", "m", "--arg", "novalue"])
    assert result.exit_code == 2


def test_emit_invalid_level() -> None:
    result = runner.invoke(app, ["emit", "m", "--level", "verbose"])
    assert result.exit_code == 2


def test_emit_invalid_sink() -> None:
    result = runner.invoke(app, ["emit", "m", "--sink", "syslog"])
    assert result.exit_code == 2


def test_render_does_not_write(tmp_path: Path) -> None:
    target = tmp_path / "never.log"
    result = runner.invoke(app, ["render", "x {{n}}", "--sink", f"file:{target}", "--level", "warn", "-a", "n=1"])

    assert result.exit_code == 0
    assert "] [WARNING] <cli>: x 1" in result.output
    assert not target.exists()


def test_palette_lists_keys() -> None:
    result = runner.invoke(app, ["palette"])
    assert result.exit_code == 0
    for key in ("end", "overline", "color.bright_blue", "back.bright_white"):
        assert key in result.output


def test_demo() -> None:
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 12
    assert "Info and more stuff" in result.output
    assert "Fatal error! Code 404" in result.output
    assert "Log message and more" in result.output


def test_main_entry_point() -> None:
    with patch("coreason_logkit.main.app") as mock_app:
        main()
        mock_app.assert_called_once()
