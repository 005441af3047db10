"""
tests/test_main.py -- Tests for the command-line runner.

uvicorn.run is replaced with a recorder so no server is started.
"""

from __future__ import annotations

import pytest

import main


@pytest.fixture
def recorded_run(monkeypatch) -> dict:
    calls: dict = {}

    def _fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(main.uvicorn, "run", _fake_run)
    return calls


def test_defaults_come_from_settings(recorded_run):
    main.main([])
    assert recorded_run["app"] == "api.main:app"
    assert recorded_run["port"] == 8080
    assert recorded_run["reload"] is False


def test_flags_override_defaults(recorded_run):
    main.main(["--host", "127.0.0.1", "--port", "9000", "--reload", "--log-level", "debug"])
    assert recorded_run["host"] == "127.0.0.1"
    assert recorded_run["port"] == 9000
    assert recorded_run["reload"] is True
    assert recorded_run["log_level"] == "debug"


def test_invalid_log_level_rejected():
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["--log-level", "verbose"])
