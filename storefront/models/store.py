# storefront/models/store.py
from pydantic import BaseModel, ConfigDict
from typing import Optional


class StoreInfo(BaseModel):
    """Снимок настроек магазина из /headless/v1/store-info. Не изменяется."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    currency: str
    currency_symbol: str = ""
    country: str = ""
    timezone: str = ""
    date_format: str = ""
    time_format: str = ""


class ConnectionStatus(BaseModel):
    """
    Ответ /headless/v1/test. Схема плагина не зафиксирована,
    поэтому все остальные ключи сохраняются как есть.
    """
    model_config = ConfigDict(extra='allow')

    wordpress_version: Optional[str] = None
    woocommerce_version: Optional[str] = None
