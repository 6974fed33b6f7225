"""Tests for the entry point, configuration and logging setup."""
import logging

import pytest

from shapemeasure import config
from shapemeasure.logging_config import setup_logging
from shapemeasure.main import main, sample_shapes
from shapemeasure.model.shapes import Circle, Rectangle


class TestMain:
    def test_sample_shapes(self):
        assert sample_shapes() == [Rectangle(3, 4), Circle(5)]

    def test_main_prints_both_shapes(self, capsys, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", logging.WARNING)
        main()
        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == ["Rectangle(width=3.0, height=4.0)", "12.0", "14.0"]
        assert lines[3] == "Circle(radius=5.0)"
        assert float(lines[4]) == pytest.approx(78.5398, abs=1e-4)
        assert float(lines[5]) == pytest.approx(31.4159, abs=1e-4)
        assert len(lines) == 6


class TestConfig:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            (" error ", logging.ERROR),
            ("", logging.WARNING),
            ("nonsense", logging.WARNING),
        ],
    )
    def test_get_log_level(self, monkeypatch, value, expected):
        monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, value)
        assert config.get_log_level() == expected

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(config.LOG_LEVEL_ENV_VAR, raising=False)
        assert config.get_log_level(default=logging.CRITICAL) == logging.CRITICAL


class TestSetupLogging:
    def test_handlers_are_not_stacked(self):
        setup_logging(level=logging.INFO)
        setup_logging(level=logging.INFO)
        logger = logging.getLogger("shapemeasure")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "shapemeasure.log"
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        logger = logging.getLogger("shapemeasure")
        assert len(logger.handlers) == 2
        logging.getLogger("shapemeasure.measure").debug("hello file")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "shapemeasure.measure - DEBUG - hello file" in content
        for handler in logger.handlers:
            handler.close()
