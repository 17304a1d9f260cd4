from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from utils.config import AppConfig, load_config
from utils.logging import LoguruBridgeHandler, configure_logging, get_logger


def test_load_config_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yml")
    assert isinstance(config, AppConfig)
    assert config.log_level == "INFO"
    assert config.classfinder_exclude == ["tests"]
    assert config.classfinder_skip_errors is False


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "rr.yml"
    path.write_text("log_level: debug\nclassfinder_exclude: [tests, scripts]\nclassfinder_skip_errors: true\n")
    config = load_config(path)
    assert config.log_level == "DEBUG"
    assert config.classfinder_exclude == ["tests", "scripts"]
    assert config.classfinder_skip_errors is True


def test_load_config_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config(path) == AppConfig()


def test_load_config_rejects_unknown_level(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("log_level: chatty\n")
    with pytest.raises(ValidationError):
        load_config(path)


def test_get_logger_bridges_to_loguru() -> None:
    configure_logging("DEBUG")
    logger = get_logger("rr.test")
    assert logger.name == "rr.test"
    logger.debug("bridged %s", "message")


def test_configure_logging_routes_stdlib_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO")
    root = logging.getLogger()
    assert [type(handler) for handler in root.handlers] == [LoguruBridgeHandler]
    assert root.level == logging.INFO
    get_logger("rr.bridge").warning("reference %s rejected", "rr://x")
    get_logger("rr.bridge").debug("below threshold")
    captured = capsys.readouterr()
    assert "reference rr://x rejected" in captured.err
    assert "below threshold" not in captured.err
    assert captured.out == ""
