from datetime import datetime

import pytest

from simplejrpc.glog.log_config import (
    LogConfig,
    load_log_config,
    parse_rotate_expire,
    replace_date_placeholders,
)

SAMPLE = {
    "path": "logs/",
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


def test_load_sample_config():
    config = load_log_config(SAMPLE)
    assert config == LogConfig(
        path="logs/",
        file="{Y-m-d}.log",
        level="error",
        stdout=False,
        st_status=0,
        rotate_backup_limit=7,
        writer_color_enable=True,
        rotate_backup_compress=9,
        rotate_expire="1d",
        flag=44,
    )


def test_keys_match_case_insensitively():
    config = load_log_config({"ROTATEEXPIRE": "2d", "Level": "debug"})
    assert config.rotate_expire == "2d"
    assert config.level == "debug"


def test_missing_and_unknown_keys_use_defaults():
    config = load_log_config({"other": 1, "path": None})
    assert config == LogConfig()


def test_integral_float_accepted_for_int():
    assert load_log_config({"Flag": 44.0}).flag == 44


@pytest.mark.parametrize(
    "data",
    [
        {"rotateBackupLimit": "7"},
        {"Flag": 4.5},
        {"stdout": 1},
        {"path": 3},
        {"StStatus": True},
    ],
)
def test_wrong_types_raise(data):
    with pytest.raises(ValueError):
        load_log_config(data)


@pytest.mark.parametrize(
    ("expire", "hours"),
    [
        ("1d", 24),
        ("7d", 168),
        ("48h", 48),
        ("xd", 24),
        ("xh", 24),
        ("", 24),
        ("3w", 24),
        ("2xd", 48),
    ],
)
def test_parse_rotate_expire(expire, hours):
    assert parse_rotate_expire(expire) == hours


def test_replace_date_placeholders():
    today = datetime.now().strftime("%Y-%m-%d")
    assert replace_date_placeholders("{Y-m-d}.log") == f"{today}.log"
    assert replace_date_placeholders("a-{Y-m-d}-{Y-m-d}") == f"a-{today}-{today}"


def test_replace_without_placeholder():
    assert replace_date_placeholders("app.log") == "app.log"