import logging

import pytest

from minkowskiplot.logging_config import parse_level, setup_logging
from minkowskiplot.main import build_state, parse_args
from minkowskiplot.model.mapping import Mode


def test_default_arguments():
    args = parse_args([])
    assert args.mode == "euclid"
    assert args.circles is False
    assert args.log_level == "INFO"
    assert args.log_file is None


def test_build_state_from_arguments():
    state = build_state(parse_args(["--mode", "minkowski", "--circles"]))
    assert state.get_mode() is Mode.MINKOWSKI
    assert state.show_circles is True
    assert len(state.points) == 3


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "minkowskiplot"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logging.getLogger("minkowskiplot.model.state").info("hello from state")
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at DEBUG." in text
        assert "minkowskiplot.model.state - INFO - hello from state" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_parse_level_accepts_names_and_numbers():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR


def test_parse_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        parse_level("loud")
