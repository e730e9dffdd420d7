"""Tests for the filter command wiring."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from linesift.application.services import FilterResult
from linesift.features.classification import ClassifiedLines
from linesift.features.statistics import StatisticsMode
from linesift.ui.cli.args.options import FilterArgs
from linesift.ui.cli.commands.filter import FilterCommand, summarize_outputs


def test_summarize_outputs() -> None:
    assert summarize_outputs([]) == "no output files written"
    assert summarize_outputs([Path("a.txt"), Path("b.txt")]) == "a.txt, b.txt"


def test_execute_logs_outputs_and_shows_statistics(
    mocker: MockerFixture, caplog: pytest.LogCaptureFixture
) -> None:
    args = FilterArgs(
        inputs=[Path("in.txt")],
        output_dir=Path("out"),
        prefix="pre_",
        append=True,
        statistics=StatisticsMode.SHORT,
    )
    result = FilterResult(lines=ClassifiedLines(), written=[Path("out/pre_strings.txt")])
    app = mocker.Mock()
    app.run.return_value = result
    display = mocker.Mock()

    command = FilterCommand(args, app=app, statistics_display=display)
    with caplog.at_level(logging.INFO, logger="linesift"):
        assert command.execute() is result

    request = app.run.call_args.args[0]
    assert request.inputs == (Path("in.txt"),)
    assert request.prefix == "pre_"
    assert request.append is True
    display.show.assert_called_once_with(None, StatisticsMode.SHORT)
    assert "Output: out/pre_strings.txt" in caplog.text
