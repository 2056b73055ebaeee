"""
Unit tests for settings and logging configuration.
"""

import pytest
import structlog
from pydantic import ValidationError

from techdispatch.config.logging import configure_logging, dispatch_context, get_logger
from techdispatch.config.settings import Settings


class TestSettings:
    """Test Settings validation."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("RECOMMENDATION_THRESHOLD", raising=False)
        s = Settings(_env_file=None)

        assert s.ENVIRONMENT == "production"
        assert s.RECOMMENDATION_THRESHOLD == 80
        assert s.ROUTE_MIN_TRAVEL_MINUTES == 15

    def test_log_level_uppercased(self):
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="verbose")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(ENVIRONMENT="qa")

    @pytest.mark.parametrize("field", ["SLOT_LOOKAHEAD_DAYS", "SLOT_SUGGESTION_LIMIT"])
    def test_slot_limits_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("RECOMMENDATION_THRESHOLD", "120")
        assert Settings(_env_file=None).RECOMMENDATION_THRESHOLD == 120


class TestLogging:
    """Test logging configuration."""

    def test_configure_logging(self, test_settings):
        configure_logging(test_settings)
        assert structlog.is_configured()
        assert get_logger("techdispatch.test") is not None

    def test_dispatch_context_binds_values(self):
        with dispatch_context(day="2026-10-20"):
            assert structlog.contextvars.get_contextvars()["day"] == "2026-10-20"
        assert "day" not in structlog.contextvars.get_contextvars()
