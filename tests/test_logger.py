"""Tests for the tree logger."""

from src.core.logger import Logger


def test_tree_written_to_log_file(tmp_path):
    logger = Logger(logs_dir=tmp_path)

    logger.tree("Server Listening", [("Host", "0.0.0.0"), ("Port", "3000")], emoji="🌐")

    text = logger.log_file.read_text(encoding="utf-8")
    assert "Server Listening" in text
    assert "├─ Host: 0.0.0.0" in text
    assert "└─ Port: 3000" in text


def test_errors_also_written_to_error_file(tmp_path):
    logger = Logger(logs_dir=tmp_path)

    logger.info("Just Info")
    logger.error("Render Failed", [("Error", "boom")])

    errors = logger.error_file.read_text(encoding="utf-8")
    assert "Render Failed" in errors
    assert "Error: boom" in errors
    assert "Just Info" not in errors


def test_debug_respects_env(tmp_path, monkeypatch):
    logger = Logger(logs_dir=tmp_path)

    monkeypatch.delenv("DEBUG", raising=False)
    logger.debug("Hidden")
    monkeypatch.setenv("DEBUG", "1")
    logger.debug("Shown")

    text = logger.log_file.read_text(encoding="utf-8")
    assert "Hidden" not in text
    assert "Shown" in text


def test_old_log_folders_removed(tmp_path):
    old = tmp_path / "2000-01-01"
    old.mkdir()
    keep = tmp_path / "not-a-date"
    keep.mkdir()

    Logger(logs_dir=tmp_path)

    assert not old.exists()
    assert keep.exists()
