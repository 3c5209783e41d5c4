"""
Tests for debug_logging and logging setup.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from balancer import balance
from utils.debug_logging import debug_log
from utils.logging_setup import APP_LOGGER_NAME, setup_logging


def test_debug_log_no_env_does_nothing(tmp_path: Path):
    # The autouse fixture clears DEBUG_LOG_PATH.
    debug_log("input", "loc", "msg", {"a": 1})
    assert list(tmp_path.iterdir()) == []


def test_debug_log_writes_jsonl(monkeypatch, tmp_path: Path):
    path = tmp_path / "trace.jsonl"
    monkeypatch.setenv("DEBUG_LOG_PATH", str(path))

    debug_log("split", "team_balancing_service.py:optimize", "best split", {"diff": 30}, run_id="run-7")

    payload: dict[str, Any] = json.loads(path.read_text(encoding="utf-8").strip())
    assert payload["stage"] == "split"
    assert payload["location"] == "team_balancing_service.py:optimize"
    assert payload["message"] == "best split"
    assert payload["data"] == {"diff": 30}
    assert payload["runId"] == "run-7"


def test_debug_log_write_failure_is_ignored(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("DEBUG_LOG_PATH", str(tmp_path / "trace.jsonl"))

    def _raise(*_args, **_kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("builtins.open", _raise)

    # Should not raise even if the write fails.
    debug_log("result", "loc", "msg")


def test_balance_traces_input_and_result(monkeypatch, tmp_path: Path, exclusive_pool):
    path = tmp_path / "trace.jsonl"
    monkeypatch.setenv("DEBUG_LOG_PATH", str(path))

    balance(exclusive_pool, method="smart")

    entries = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [e["stage"] for e in entries] == ["input", "result"]
    assert entries[0]["data"]["players"] == [p.id for p in exclusive_pool]
    assert entries[1]["data"]["role_feasible"] is True


def test_setup_logging_sets_namespace_level():
    logger = setup_logging("DEBUG")
    assert logger.name == APP_LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert logging.getLogger("scrim_balancer.balancer").getEffectiveLevel() == logging.DEBUG

    setup_logging("not-a-level")
    assert logging.getLogger(APP_LOGGER_NAME).level == logging.INFO
    setup_logging(logging.WARNING)
