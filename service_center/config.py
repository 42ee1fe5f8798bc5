"""
Type-safe configuration using Pydantic Settings
Validates environment variables and provides sensible defaults
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ServiceCenterConfig(BaseSettings):
    """
    Service center configuration with validation
    Automatically loads from SERVICE_CENTER_* environment variables and .env file
    """

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_CENTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    center_name: str = Field(
        "Vehicle Service Center", description="Title shown above the main menu"
    )

    log_level: str = Field(
        "WARNING", description="Logging level for the console application"
    )

    # Dates are opaque keys unless strict checking is switched on
    strict_dates: bool = Field(
        False, description="Reject dates that are not real DD-MM-YYYY calendar dates"
    )

    currency_symbol: str = Field("$", description="Prefix for displayed costs")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name"""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be a logging level name, got '{v}'")
        return level

    def format_cost(self, amount) -> str:
        """Format a cost for display"""
        return f"{self.currency_symbol}{amount:.2f}"


# Singleton instance
_config: Optional[ServiceCenterConfig] = None


def get_config() -> ServiceCenterConfig:
    """
    Get or create the global configuration instance

    Returns:
        ServiceCenterConfig: Validated configuration

    Raises:
        ValidationError: If configuration is invalid
    """
    global _config
    if _config is None:
        _config = ServiceCenterConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it"""
    global _config
    _config = None
