from datetime import datetime

import pytest

from simplejrpc.glog.log_config import LogConfig, load_log_config
from simplejrpc.glog.logger import GLogger, new_logger


def _config(tmp_path, **overrides):
    values = {
        "path": str(tmp_path / "logs"),
        "file": "app.log",
        "level": "debug",
        "stdout": False,
        "rotate_backup_limit": 7,
        "writer_color_enable": False,
        "rotate_backup_compress": 9,
        "rotate_expire": "1d",
        "flag": 44,
    }
    values.update(overrides)
    return LogConfig(**values)


def _read(logger, path):
    for handler in logger.handlers:
        handler.flush()
    return path.read_text(encoding="utf-8")


def test_sample_config_creates_dated_file(tmp_path):
    config = load_log_config(
        {
            "path": str(tmp_path / "logs"),
            "file": "{Y-m-d}.log",
            "level": "error",
            "stdout": False,
            "StStatus": 0,
            "rotateBackupLimit": 7,
            "writerColorEnable": True,
            "RotateBackupCompress": 9,
            "rotateExpire": "1d",
            "Flag": 44,
        }
    )
    logger = new_logger(config)
    logger.info("Logger initialized successfully")
    logger.warning("This is a warning message")
    logger.error("This is an error message")
    today = datetime.now().strftime("%Y-%m-%d")
    content = _read(logger, tmp_path / "logs" / f"{today}.log")
    assert "This is an error message" in content
    assert "warning message" not in content
    assert "initialized" not in content
    assert "\x1b[31mERROR\x1b[0m" in content


def test_error_with_stack_lists_threads(tmp_path):
    logger = new_logger(_config(tmp_path))
    GLogger(logger).error_with_stack("all threads")
    content = _read(logger, tmp_path / "logs" / "app.log")
    assert "all threads\nfull stack: " in content
    assert "MainThread" in content


def test_caller_is_recorded(tmp_path):
    logger = new_logger(_config(tmp_path))
    GLogger(logger).info("where am i")
    content = _read(logger, tmp_path / "logs" / "app.log")
    assert "test_logger.py:" in content


def test_fields_appended_as_json(tmp_path):
    logger = new_logger(_config(tmp_path))
    GLogger(logger).info("User logged in", username="john", attempt=3)
    content = _read(logger, tmp_path / "logs" / "app.log")
    assert 'User logged in\t{"username": "john", "attempt": 3}' in content


def test_warn_label_and_debug(tmp_path):
    logger = new_logger(_config(tmp_path))
    gl = GLogger(logger)
    gl.warn("careful")
    gl.debug("details")
    content = _read(logger, tmp_path / "logs" / "app.log")
    assert "\tWARN\t" in content
    assert "\tDEBUG\t" in content
    assert "WARNING" not in content


def test_invalid_level_defaults_to_info(tmp_path):
    logger = new_logger(_config(tmp_path, level="bogus"))
    gl = GLogger(logger)
    gl.debug("hidden debug")
    gl.info("shown info")
    content = _read(logger, tmp_path / "logs" / "app.log")
    assert "shown info" in content
    assert "hidden debug" not in content


def test_uppercase_level_accepted(tmp_path):
    logger = new_logger(_config(tmp_path, level="WARN"))
    gl = GLogger(logger)
    gl.info("hidden info")
    gl.warn("shown warn")
    content = _read(logger, tmp_path / "logs" / "app.log")
    assert "shown warn" in content
    assert "hidden info" not in content


def test_stdout_output(tmp_path, capsys):
    logger = new_logger(_config(tmp_path, stdout=True))
    GLogger(logger).info("to the console")
    assert "to the console" in capsys.readouterr().out


def test_new_logger_replaces_handlers(tmp_path):
    first = new_logger(_config(tmp_path))
    second = new_logger(_config(tmp_path, stdout=True))
    assert first is second
    assert len(second.handlers) == 2


def test_nested_directory_created(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    logger = new_logger(_config(tmp_path, path=str(nested)))
    GLogger(logger).info("deep")
    assert "deep" in _read(logger, nested / "app.log")


def test_fatal_exits(tmp_path):
    logger = new_logger(_config(tmp_path))
    with pytest.raises(SystemExit) as info:
        GLogger(logger).fatal("fatal problem")
    assert info.value.code == 1
    assert "fatal problem\nstack: " in _read(logger, tmp_path / "logs" / "app.log")


def test_panic_raises(tmp_path):
    logger = new_logger(_config(tmp_path))
    with pytest.raises(RuntimeError, match="panic problem"):
        GLogger(logger).panic("panic problem")
    assert "\tFATAL\t" in _read(logger, tmp_path / "logs" / "app.log")


def test_empty_path_raises(tmp_path):
    with pytest.raises(OSError):
        new_logger(_config(tmp_path, path=""))