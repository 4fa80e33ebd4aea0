"""Order Service Configuration"""

from decimal import Decimal
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Order Pricing Service"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8002
    cors_origins: list[str] = ["*"]

    # Pricing
    currency_symbol: str = "$"
    custom_art_setup_fee: Decimal = Decimal("10")
    default_delivery_method: str = "pickup"

    # Operators presenting this key in X-Admin-Key may apply admin discounts
    admin_api_key: Optional[str] = None

    class Config:
        env_file = "../config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def admin_enabled(self) -> bool:
        """Check if admin discounts can be authorized at all"""
        return bool(self.admin_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
