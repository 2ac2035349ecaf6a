# storefront/services/http.py
import json
import logging
from typing import Any, Dict, Optional, Type, Union

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Базовый класс для ошибок транспорта (сеть, статус ответа, формат ответа)."""
    def __init__(self, message="Ошибка при обращении к удаленному API", status_code=None, details=None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class WooCommerceServiceError(ApiClientError):
    """Ошибка при взаимодействии с WooCommerce REST API."""


class WordPressServiceError(ApiClientError):
    """Ошибка при взаимодействии с WordPress REST API."""


class RestClient:
    """
    Тонкая обертка над httpx.AsyncClient: выполняет один запрос и
    возвращает разобранный JSON либо вызывает error_class.
    Повторов и кэша нет.
    """
    error_class: Type[ApiClientError] = ApiClientError
    service_name = "REST API"

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        timeout: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip('/')
        timeouts = httpx.Timeout(timeout, connect=5.0)
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            params=params,
            timeout=timeouts,
            transport=transport,
        )
        logger.info(f"{self.service_name} client initialized for URL: {self.base_url}")

    async def aclose(self):
        await self._client.aclose()
        logger.info(f"{self.service_name} HTTP client closed.")

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", endpoint, params=params)

    async def post(self, endpoint: str, json_data: Optional[Union[Dict, BaseModel]] = None) -> Any:
        return await self._request("POST", endpoint, json_data=json_data)

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Union[Dict, BaseModel]] = None,
    ) -> Any:
        endpoint = endpoint.lstrip('/')
        payload_dict: Optional[Dict] = None
        if isinstance(json_data, BaseModel):
            payload_dict = json_data.model_dump(exclude_none=True)
        elif json_data is not None:
            payload_dict = json_data

        logger.debug(f"Requesting {method} {endpoint} | Params: {params} | Payload: {payload_dict!r}")

        try:
            response = await self._client.request(method, endpoint, params=params, json=payload_dict)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e) from e
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {e} for {method} {endpoint}")
            raise self.error_class(f"Превышен таймаут запроса к {self.service_name}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error: {e} for {method} {endpoint}")
            raise self.error_class(f"Ошибка сети при подключении к {self.service_name}") from e

        if response.status_code == 204:
            logger.debug(f"Received 204 No Content for {method} {endpoint}")
            return None

        try:
            response_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to decode JSON response for {method} {endpoint}. Status: {response.status_code}. Response text: {response.text[:500]}...")
            raise self.error_class(
                f"Ошибка декодирования JSON ответа от {self.service_name}",
                status_code=response.status_code,
                details=response.text,
            ) from e
        logger.debug(f"Received {response.status_code} JSON response for {method} {endpoint}. Body sample: {str(response_data)[:200]}...")
        return response_data

    def _status_error(self, e: httpx.HTTPStatusError) -> ApiClientError:
        error_status_code = e.response.status_code
        error_message = f"HTTP ошибка {error_status_code} от {self.service_name}"
        error_details: Any = e.response.text

        # WordPress отдает ошибки в виде {"code": ..., "message": ..., "data": {...}}
        try:
            wp_error = e.response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            wp_error = None

        if isinstance(wp_error, dict):
            error_message = wp_error.get("message") or error_message
            error_code = wp_error.get("code", "unknown_error_code")
            error_details = wp_error
            logger.error(f"{self.service_name} error: {error_status_code} {error_code} - {error_message} for {e.request.url.path}")
        else:
            logger.error(f"HTTP error: {error_status_code} for {e.request.url.path}. Response text: {error_details[:500]}...")

        return self.error_class(
            message=f"Ошибка {self.service_name}: {error_message}",
            status_code=error_status_code,
            details=error_details,
        )


class WooCommerceClient(RestClient):
    """
    Клиент WooCommerce REST API.
    Ключи передаются в query string каждого запроса (queryStringAuth).
    """
    error_class = WooCommerceServiceError
    service_name = "WooCommerce API"

    def __init__(
        self,
        site_url: str,
        consumer_key: str = "",
        consumer_secret: str = "",
        api_version: str = "wc/v3",
        timeout: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not consumer_key or not consumer_secret:
            logger.warning("WooCommerce client created without consumer key/secret; authenticated requests will be rejected.")
        base_url = f"{site_url.rstrip('/')}/wp-json/{api_version.strip('/')}"
        super().__init__(
            base_url,
            params={'consumer_key': consumer_key, 'consumer_secret': consumer_secret},
            timeout=timeout,
            transport=transport,
        )


class WordPressClient(RestClient):
    """Клиент WordPress REST API для кастомных эндпоинтов. Без авторизации."""
    error_class = WordPressServiceError
    service_name = "WordPress API"

    def __init__(
        self,
        site_url: str,
        api_prefix: str = "wp-json",
        timeout: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        base_url = f"{site_url.rstrip('/')}/{api_prefix.strip('/')}"
        super().__init__(
            base_url,
            headers={'Content-Type': 'application/json'},
            timeout=timeout,
            transport=transport,
        )
