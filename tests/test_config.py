from __future__ import annotations

import logging
from pathlib import Path

from termindex.config import get_settings
from termindex.logs import HANDLER_NAME, configure_logging


def test_defaults(monkeypatch) -> None:
    for var in ("TERMINDEX_DATA_DIR", "TERMINDEX_LOG_LEVEL", "TERMINDEX_BASIC_USER", "TERMINDEX_BASIC_PASS"):
        monkeypatch.delenv(var, raising=False)
    s = get_settings()
    assert s.data_dir == Path("data")
    assert s.log_level == "INFO"
    assert not s.auth_enabled


def test_env_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("TERMINDEX_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TERMINDEX_LOG_LEVEL", "debug")
    monkeypatch.setenv("TERMINDEX_BASIC_USER", "u")
    monkeypatch.setenv("TERMINDEX_BASIC_PASS", "p")
    s = get_settings()
    assert s.data_dir == tmp_path
    assert s.log_level == "DEBUG"
    assert s.auth_enabled


def test_configure_logging_installs_one_handler() -> None:
    configure_logging("debug")
    configure_logging("warning")
    logger = logging.getLogger("termindex")
    ours = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert logger.level == logging.WARNING


def test_log_records_follow_current_stderr(capsys) -> None:
    configure_logging("info")
    logging.getLogger("termindex.indexer").info("committed something")
    assert "committed something" in capsys.readouterr().err
    configure_logging("warning")
