# storefront/core/config.py
import logging
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront API"
    API_V1_STR: str = "/api/v1"
    LOGGING_LEVEL: str = "INFO"

    # --- WordPress / WooCommerce ---
    WORDPRESS_URL: str = Field(
        "http://localhost:10033",
        validation_alias=AliasChoices("WORDPRESS_URL", "NEXT_PUBLIC_WORDPRESS_URL"),
    )
    WORDPRESS_API_PREFIX: str = "wp-json"
    WC_CONSUMER_KEY: str = ""
    WC_CONSUMER_SECRET: str = ""
    WOOCOMMERCE_API_VERSION: str = "wc/v3"

    # --- Отображение ---
    DISPLAY_CURRENCY: str = "CAD"

    REQUEST_TIMEOUT: float = 20.0

    @property
    def has_woocommerce_credentials(self) -> bool:
        return bool(self.WC_CONSUMER_KEY and self.WC_CONSUMER_SECRET)

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
        populate_by_name=True,
    )


settings = Settings()
# Без ключей клиент создается, но каждый запрос к каталогу будет отклонен
if not settings.has_woocommerce_credentials:
    logger.warning("WooCommerce consumer key/secret are empty. Catalog requests will fail until WC_CONSUMER_KEY and WC_CONSUMER_SECRET are set.")
