import pytest

import config


@pytest.mark.parametrize("value, expected", [
    ("debug", "DEBUG"),
    ("WARNING", "WARNING"),
    ("foo", "INFO"),
    ("", "INFO"),
    (None, "INFO"),
])
def test_log_level(value, expected):
    assert config._log_level(value) == expected


def test_defaults():
    assert config.VA_SERVER_URL == "http://localhost:2001"
    assert config.VA_REQUEST_TIMEOUT == 30
    assert config.LOG_LEVEL == "INFO"
