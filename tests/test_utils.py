import logging
import logging.handlers

from app.config import config
from app.utils.logger import setup_logger
from app.utils.timing import timed


def test_timed_adds_duration_to_dicts():
    result = timed(lambda value: {"value": value}, 3)
    assert result["value"] == 3
    assert result["duration_s"] >= 0


def test_timed_leaves_other_results_alone():
    assert timed(lambda: "sql") == "sql"


def test_settings_carry_conversion_defaults():
    nrc_cfg = config["nrc_conversion"]
    assert nrc_cfg["target_schema"] == "fineract_default"
    assert nrc_cfg["download_filename"] == "nrc_townships.sql"


def test_setup_logger_installs_handlers_once():
    setup_logger("first")
    setup_logger("second")
    root = logging.getLogger()
    file_handlers = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1


def test_environment_does_not_change_settings(monkeypatch):
    from app.config import load_config

    monkeypatch.setenv("NRC_TARGET_SCHEMA", "other")
    assert load_config()["nrc_conversion"]["target_schema"] == "fineract_default"
