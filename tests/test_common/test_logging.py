import logging
from pathlib import Path

from indelcal.common import setup_logging


def test_setup_logging_writes_file(tmp_path: Path):
    log_file = setup_logging(False, tmp_path, "run.log", "debug", "high", silent_mode=True)
    logging.getLogger("indelcal.test").debug("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert log_file == tmp_path / "run.log"
    text = log_file.read_text()
    assert "written to file" in text
    assert "line" in text


def test_setup_logging_without_file(tmp_path: Path, capsys):
    log_file = setup_logging(True, tmp_path, "unused.log", "info", "low")
    logging.getLogger("indelcal.test").info("to stdout")
    assert log_file is None
    assert not (tmp_path / "unused.log").exists()
    assert "INFO:indelcal.test:to stdout" in capsys.readouterr().out
