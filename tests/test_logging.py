from __future__ import annotations

import logging
from typing import Iterator

import pytest

from statkit.analyze.percentiles import percentile
from statkit.common.logging import configure_logging, get_logger
from statkit.config import StatkitConfig, load_config


@pytest.fixture
def statkit_root() -> Iterator[logging.Logger]:
    root = logging.getLogger("statkit")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    root.handlers = []
    yield root
    root.handlers = handlers
    root.propagate = propagate
    root.setLevel(level)


def test_get_logger_nests_under_statkit() -> None:
    log = get_logger("custom")
    assert log._logger.name == "statkit.custom"
    assert get_logger("statkit.result")._logger.name == "statkit.result"


def test_configure_logging_is_idempotent(statkit_root: logging.Logger) -> None:
    configure_logging(logging.INFO)
    configure_logging("DEBUG")
    assert len(statkit_root.handlers) == 1
    assert statkit_root.level == logging.DEBUG
    assert statkit_root.propagate is False


def test_configured_logger_writes_json_to_stderr(
    statkit_root: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_logging(logging.DEBUG)
    percentile([1.0, 2.0], 101)
    err = capsys.readouterr().err
    assert '"event": "stat.failure"' in err
    assert '"kind": "InvalidPercentile"' in err
    assert '"level": "debug"' in err


def test_library_is_silent_by_default(
    statkit_root: logging.Logger, capsys: pytest.CaptureFixture[str]
) -> None:
    statkit_root.setLevel(logging.NOTSET)
    percentile([], 50)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_configure_logging_takes_level_from_config(statkit_root: logging.Logger) -> None:
    configure_logging(config=StatkitConfig(log_level="DEBUG"))
    assert statkit_root.level == logging.DEBUG
    # an explicit level wins over the config
    configure_logging(logging.ERROR, config=StatkitConfig(log_level="DEBUG"))
    assert statkit_root.level == logging.ERROR


def test_configure_logging_defaults_to_warning(statkit_root: logging.Logger) -> None:
    configure_logging()
    assert statkit_root.level == logging.WARNING


def test_loaded_config_drives_logging_level(statkit_root: logging.Logger, tmp_path) -> None:
    (tmp_path / ".statkit.toml").write_text("log_level = 'INFO'\n", encoding="utf-8")
    configure_logging(config=load_config(project_root=tmp_path))
    assert statkit_root.level == logging.INFO
