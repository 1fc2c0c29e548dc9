"""Application configuration using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"

    # Pricing (USDC per kg)
    CURRENCY: str = "USDC"
    DEFAULT_MANIOC_PRICE: float = Field(0.5, gt=0)
    DEFAULT_CAFE_PRICE: float = Field(2.0, gt=0)
    MIN_CROP_PRICE: float = 0.01
    MAX_CROP_PRICE: float = 100.0
    MAX_PRICE_CHANGE_PERCENT: float = 50.0
    PRICE_TREND_THRESHOLD_PERCENT: float = 1.0
    PRICE_HISTORY_LIMIT: int = 30

    # Loans
    DEFAULT_INTEREST_RATE: float = 0.12

    # Wallet SDK loading
    WALLET_SDK_ENABLED: bool = False
    WALLET_SDK_MODULE: str = "hiero_sdk_python"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def default_prices(self) -> dict[str, float]:
        """Fallback reference price per crop type value."""
        return {
            "manioc": self.DEFAULT_MANIOC_PRICE,
            "cafe": self.DEFAULT_CAFE_PRICE,
        }


# Global settings instance
settings = Settings()
