"""Tests for the console entry point helpers."""

from __future__ import annotations

import main
from covid_tracking.data.models import StateInfo


def test_print_states_renders_table(capsys) -> None:
    main.print_states([StateInfo("AK", "Alaska"), StateInfo("AZ", "Arizona")])

    out = capsys.readouterr().out
    assert "Alaska" in out
    assert "AZ" in out
    assert "Всего штатов: 2" in out


def test_print_states_empty_prints_nothing(capsys) -> None:
    main.print_states([])

    assert capsys.readouterr().out == ""


def test_setup_logging_adds_file_sink(tmp_path, monkeypatch) -> None:
    log_file = tmp_path / "covid.log"
    monkeypatch.setitem(main.CONFIG["APP"], "LOG_FILE", str(log_file))

    main.setup_logging()
    main.logger.info("проверка")
    main.logger.remove()

    assert "проверка" in log_file.read_text(encoding="utf-8")
