import pytest

from simplejrpc.config.base import ConfigError
from simplejrpc.config.formatter import ConfigFormatter

CONTENT = {
    "logger": {
        "level": "111",
        "stdout": True,
        "nihao": {"aaa": "000000000000"},
    },
    "zack": "22222",
}


@pytest.fixture
def formatter():
    return ConfigFormatter(CONTENT)


def test_nested_string(formatter):
    assert formatter.get_value("logger.level").string() == "111"


def test_deeply_nested_string(formatter):
    assert formatter.get_value("logger.nihao.aaa").string() == "000000000000"


def test_top_level_string(formatter):
    assert formatter.get_value("zack").string() == "22222"


def test_nested_bool(formatter):
    assert formatter.get_value("logger.stdout").bool() is True


def test_missing_key_raises(formatter):
    with pytest.raises(ConfigError):
        formatter.get_value("logger.missing").string()


def test_missing_intermediate_raises(formatter):
    with pytest.raises(ConfigError):
        formatter.get_value("nope.level").string()


def test_intermediate_not_a_map_raises(formatter):
    with pytest.raises(ConfigError):
        formatter.get_value("zack.inner").string()


def test_wrong_type_raises(formatter):
    with pytest.raises(ConfigError):
        formatter.get_value("logger.stdout").string()
    with pytest.raises(ConfigError):
        formatter.get_value("zack").bool()


def test_no_section_selected(formatter):
    with pytest.raises(ConfigError):
        formatter.string()


def test_get_value_does_not_change_original(formatter):
    formatter.get_value("zack")
    level = formatter.get_value("logger.level")
    formatter.get_value("logger.stdout")
    assert level.string() == "111"


def test_map(formatter):
    assert formatter.get_value("logger.nihao").map() == {"aaa": "000000000000"}
    assert formatter.get_value("logger").map()["level"] == "111"


def test_numbers():
    numbers = ConfigFormatter({"a": {"n": 3.9, "m": 7}, "neg": -2.5})
    assert numbers.get_value("a.n").int() == 3
    assert numbers.get_value("a.n").float64() == 3.9
    assert numbers.get_value("a.m").int() == 7
    assert numbers.get_value("neg").int() == -2


def test_bool_is_not_a_number():
    with pytest.raises(ConfigError):
        ConfigFormatter({"flag": True}).get_value("flag").int()


def test_list():
    items = ConfigFormatter({"a": {"items": [1, "x"]}})
    assert items.get_value("a.items").list() == [1, "x"]
    with pytest.raises(ConfigError):
        items.get_value("a").list()


def test_without_err_helpers(formatter):
    missing = formatter.get_value("nothing")
    assert missing.string_without_err() == ""
    assert missing.int_without_err() == 0
    assert missing.bool_without_err() is False
    assert missing.map_without_err() == {}
    assert missing.list_without_err() == []
    assert formatter.get_value("zack").string_without_err() == "22222"


def test_with_default_helpers(formatter):
    assert formatter.get_value("nothing").string_with_default("fallback") == "fallback"
    assert formatter.get_value("zack").string_with_default("fallback") == "22222"
    assert formatter.get_value("nothing").int_with_default(42) == 42


def test_non_dict_content():
    with pytest.raises(ConfigError):
        ConfigFormatter(["zack"]).get_value("zack").string()