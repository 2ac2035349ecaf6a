# storefront/services/wordpress.py
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from storefront.models.store import ConnectionStatus, StoreInfo
from storefront.services.http import ApiClientError, WordPressClient, WordPressServiceError

logger = logging.getLogger(__name__)


class WordPressService:
    """
    Кастомные эндпоинты WordPress.
    Проверка связи и настройки магазина критичны и пробрасывают ошибки,
    отзывы и FAQ - декоративный контент и при ошибке возвращают [].
    """
    def __init__(self, content: WordPressClient):
        self.content = content

    async def test_connection(self) -> ConnectionStatus:
        try:
            data = await self.content.get("headless/v1/test")
            try:
                return ConnectionStatus.model_validate(data)
            except ValidationError as e:
                raise WordPressServiceError("Неожиданный ответ проверки соединения", details=e.errors()) from e
        except ApiClientError as e:
            logger.error(f"Error testing connection: {e}")
            raise

    async def get_store_info(self) -> StoreInfo:
        try:
            data = await self.content.get("headless/v1/store-info")
            try:
                return StoreInfo.model_validate(data)
            except ValidationError as e:
                raise WordPressServiceError("Неожиданный формат информации о магазине", details=e.errors()) from e
        except ApiClientError as e:
            logger.error(f"Error fetching store info: {e}")
            raise

    async def _get_content_list(self, endpoint: str, label: str) -> List[Dict[str, Any]]:
        try:
            data = await self.content.get(endpoint)
        except ApiClientError as e:
            logger.warning(f"Error fetching {label}, returning empty list: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Unexpected data type received for {label}: {type(data)}")
            return []
        records = [item for item in data if isinstance(item, dict)]
        if len(records) != len(data):
            logger.warning(f"Dropped {len(data) - len(records)} non-object item(s) from {label}")
        return records

    async def get_testimonials(self) -> List[Dict[str, Any]]:
        return await self._get_content_list("wp/v2/testimonial", "testimonials")

    async def get_faqs(self) -> List[Dict[str, Any]]:
        return await self._get_content_list("wp/v2/faq", "FAQs")
