"""
Tests for configuration loading and validation
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from service_center.config import ServiceCenterConfig, get_config, reset_config


class TestServiceCenterConfig:
    """Tests for ServiceCenterConfig"""

    def test_defaults(self):
        """Test configuration works without any environment"""
        config = ServiceCenterConfig(_env_file=None)

        assert config.center_name == "Vehicle Service Center"
        assert config.log_level == "WARNING"
        assert config.strict_dates is False
        assert config.currency_symbol == "$"

    def test_loads_from_environment(self, monkeypatch):
        """Test SERVICE_CENTER_* variables override defaults"""
        monkeypatch.setenv("SERVICE_CENTER_CENTER_NAME", "Garage North")
        monkeypatch.setenv("SERVICE_CENTER_STRICT_DATES", "true")
        monkeypatch.setenv("SERVICE_CENTER_CURRENCY_SYMBOL", "€")

        config = ServiceCenterConfig(_env_file=None)

        assert config.center_name == "Garage North"
        assert config.strict_dates is True
        assert config.currency_symbol == "€"

    def test_log_level_normalized(self):
        """Test log level is case-insensitive"""
        assert ServiceCenterConfig(_env_file=None, log_level=" debug ").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log level is rejected"""
        with pytest.raises(ValidationError):
            ServiceCenterConfig(_env_file=None, log_level="LOUD")

    def test_format_cost(self):
        """Test costs are shown with two decimals"""
        config = ServiceCenterConfig(_env_file=None)
        assert config.format_cost(Decimal("300.0")) == "$300.00"
        assert config.format_cost(Decimal("50")) == "$50.00"


class TestGetConfig:
    """Tests for the configuration singleton"""

    def test_returns_same_instance(self):
        """Test get_config caches its instance"""
        assert get_config() is get_config()

    def test_reset_reloads(self, monkeypatch):
        """Test reset_config picks up new environment"""
        first = get_config()
        monkeypatch.setenv("SERVICE_CENTER_CENTER_NAME", "Garage South")
        reset_config()

        second = get_config()

        assert second is not first
        assert second.center_name == "Garage South"
