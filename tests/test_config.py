import logging

from loans_manager.config.logging_config import (
    CorrelationIdFilter,
    SafeFormatter,
    correlation_id_var,
)
from loans_manager.config.settings import (
    ApiSettings,
    DevelopmentConfig,
    TestingConfig,
    get_config,
)


def test_get_config_by_env():
    assert get_config("testing") is TestingConfig
    assert get_config("unknown") is DevelopmentConfig


def test_api_settings_from_config():
    settings = ApiSettings.from_config(TestingConfig)

    assert settings.max_number_of_record_to_get == 10


def _record():
    return logging.LogRecord("loans_manager.test", logging.INFO, __file__, 1, "hello", None, None)


def test_correlation_id_filter_uses_context():
    token = correlation_id_var.set("req-42")
    try:
        record = _record()
        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-42"
    finally:
        correlation_id_var.reset(token)


def test_safe_formatter_without_filter():
    formatter = SafeFormatter("[%(correlation_id)s] %(message)s")

    assert formatter.format(_record()) == "[NO Correlation ID] hello"


def test_testing_default_take_fits_maximum():
    settings = ApiSettings.from_config(TestingConfig)

    assert settings.take_or_default(None) <= settings.max_number_of_record_to_get
    assert settings.take_or_default(7) == 7


def test_default_take_is_capped():
    settings = ApiSettings(max_number_of_record_to_get=5, default_take=15)

    assert settings.take_or_default(None) == 5
