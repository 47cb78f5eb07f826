"""Tests for CLI log sinks."""

from loguru import logger

from elementsrpc.cli.shared import logging_utils


def test_rotating_log_file_is_created_once(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(logging_utils, "_SINK_IDS", {})
    path = logging_utils.ensure_rotating_log_file("cli-test")
    try:
        assert path == tmp_path / ".elementsrpc" / "logs" / "cli-test.log"
        assert path.parent.is_dir()
        assert logging_utils.ensure_rotating_log_file("cli-test") == path
        assert list(logging_utils._SINK_IDS) == ["cli-test"]
    finally:
        logger.remove(logging_utils._SINK_IDS["cli-test"])
