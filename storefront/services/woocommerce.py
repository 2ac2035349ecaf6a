# storefront/services/woocommerce.py
import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from storefront.models.order import OrderCreate
from storefront.models.product import Category, Product
from storefront.models.query import CategoryQuery, PageOptions, ProductQuery
from storefront.services.http import (
    ApiClientError,
    WooCommerceClient,
    WooCommerceServiceError,
    WordPressClient,
)

logger = logging.getLogger(__name__)

FEATURED_PRODUCTS_ENDPOINT = "headless/v1/featured-products"

_products_adapter = TypeAdapter(List[Product])
_categories_adapter = TypeAdapter(List[Category])


def _resolve_query(query_class, query, options: Dict[str, Any]):
    """Объект запроса либо набор опций, но не то и другое сразу."""
    if query is not None and options:
        raise TypeError(f"Pass either a {query_class.__name__} or keyword options, not both: {sorted(options)}")
    return query if query is not None else query_class(**options)


class FetchAttempt(BaseModel):
    """Одна стадия получения данных."""
    source: Literal['content', 'catalog']
    succeeded: bool
    error: Optional[str] = None


class FeaturedProductsResult(BaseModel):
    """Итог получения избранных товаров: основная попытка, резервная и результат."""
    primary: FetchAttempt
    fallback: Optional[FetchAttempt] = None
    products: List[Product]

    @property
    def used_fallback(self) -> bool:
        return self.fallback is not None


class WooCommerceService:
    """
    Асинхронный сервис для работы с каталогом WooCommerce.
    Клиенты создаются снаружи и передаются в конструктор.
    """
    def __init__(self, catalog: WooCommerceClient, content: WordPressClient):
        self.catalog = catalog
        self.content = content

    @staticmethod
    def _parse_products(data: Any) -> List[Product]:
        try:
            return _products_adapter.validate_python(data)
        except ValidationError as e:
            raise WooCommerceServiceError("Неожиданный формат списка товаров", details=e.errors()) from e

    async def get_products(self, query: Optional[ProductQuery] = None, **filters) -> List[Product]:
        """
        Список товаров в порядке, который вернул сервер.
        Пагинацию вызывающий код делает сам через page/per_page.
        """
        query = _resolve_query(ProductQuery, query, filters)
        params = query.to_params()
        logger.info(f"Fetching products with params: {params}")
        try:
            data = await self.catalog.get("products", params=params)
            return self._parse_products(data)
        except ApiClientError as e:
            logger.error(f"Error fetching products: {e}", exc_info=True)
            raise

    async def get_product(self, product_id: int) -> Product:
        logger.info(f"Fetching product with ID: {product_id}")
        try:
            data = await self.catalog.get(f"products/{product_id}")
            try:
                return Product.model_validate(data)
            except ValidationError as e:
                raise WooCommerceServiceError(f"Неожиданный формат товара {product_id}", details=e.errors()) from e
        except ApiClientError as e:
            logger.error(f"Error fetching product {product_id}: {e}")
            raise

    async def get_product_by_slug(self, slug: str) -> Optional[Product]:
        """Первый товар с таким slug или None, если ничего не найдено."""
        logger.info(f"Fetching product by slug: {slug}")
        try:
            products = self._parse_products(await self.catalog.get("products", params={'slug': slug}))
        except ApiClientError as e:
            logger.error(f"Error fetching product by slug '{slug}': {e}")
            raise
        if not products:
            logger.info(f"No product found for slug '{slug}'")
            return None
        return products[0]

    async def get_categories(self, query: Optional[CategoryQuery] = None, **filters) -> List[Category]:
        query = _resolve_query(CategoryQuery, query, filters)
        params = query.to_params()
        logger.info(f"Fetching categories with params: {params}")
        try:
            data = await self.catalog.get("products/categories", params=params)
            try:
                return _categories_adapter.validate_python(data)
            except ValidationError as e:
                raise WooCommerceServiceError("Неожиданный формат списка категорий", details=e.errors()) from e
        except ApiClientError as e:
            logger.error(f"Error fetching categories: {e}", exc_info=True)
            raise

    async def resolve_featured_products(self, limit: int = 8) -> FeaturedProductsResult:
        """
        Сначала кастомный эндпоинт WordPress, при любой ошибке - фильтр featured
        в WooCommerce. Ошибка пробрасывается только если упали обе стадии.
        """
        try:
            data = await self.content.get(FEATURED_PRODUCTS_ENDPOINT)
            products = self._parse_products(data)[:limit]
            return FeaturedProductsResult(
                primary=FetchAttempt(source='content', succeeded=True),
                products=products,
            )
        except ApiClientError as e:
            logger.warning(f"Featured products endpoint failed, falling back to WooCommerce: {e}")
            primary = FetchAttempt(source='content', succeeded=False, error=e.message)

        # Если упадет и этот запрос, ошибка уйдет вызывающему коду
        products = await self.get_products(featured=True, per_page=limit)
        return FeaturedProductsResult(
            primary=primary,
            fallback=FetchAttempt(source='catalog', succeeded=True),
            products=products,
        )

    async def get_featured_products(self, limit: int = 8) -> List[Product]:
        result = await self.resolve_featured_products(limit)
        return result.products

    async def search_products(self, query: str, limit: int = 20) -> List[Product]:
        return await self.get_products(search=query, per_page=limit)

    async def get_products_by_category(
        self,
        category_id: int,
        page_options: Optional[PageOptions] = None,
        **options
    ) -> List[Product]:
        page_options = _resolve_query(PageOptions, page_options, options)
        return await self.get_products(category=category_id, **page_options.to_params())

    async def create_order(self, order: OrderCreate) -> Dict[str, Any]:
        """
        Создает заказ в WooCommerce. Не идемпотентно: каждый вызов создает новый заказ.
        Возвращает заказ в том виде, в каком его вернул WooCommerce.
        """
        logger.info(f"Attempting to create order with {len(order.line_items)} line item(s)...")
        try:
            created = await self.catalog.post("orders", json_data=order)
        except ApiClientError as e:
            logger.error(f"Error creating order: {e}", exc_info=True)
            raise
        if not isinstance(created, dict):
            logger.error(f"Failed to create order. Unexpected response type: {type(created)}")
            raise WooCommerceServiceError("Не удалось создать заказ: неожиданный ответ от API")
        logger.info(f"Order created successfully with ID: {created.get('id')}")
        return created
