# storefront/services/diagnostics.py
import asyncio
import logging
from typing import List

from storefront.core.config import settings
from storefront.models.diagnostics import DiagnosticReport, ProductSummary
from storefront.models.product import Product
from storefront.services.http import ApiClientError
from storefront.services.woocommerce import WooCommerceService
from storefront.services.wordpress import WordPressService
from storefront.utils import helpers

logger = logging.getLogger(__name__)

CONNECTION_FAILED = "WordPress connection failed"
STORE_INFO_FAILED = "Store info failed"
PRODUCTS_FAILED = "WooCommerce products failed"


def summarize_product(product: Product, currency: str) -> ProductSummary:
    sale_percentage = None
    if helpers.is_on_sale(product):
        sale_percentage = helpers.get_sale_percentage(product.regular_price, product.sale_price)
    return ProductSummary(
        id=product.id,
        name=product.name,
        image=helpers.get_main_image(product),
        price=helpers.format_price(product.price, currency),
        stock=helpers.get_stock_status_text(product),
        sale_percentage=sale_percentage,
    )


async def run_diagnostics(
    wordpress: WordPressService,
    woocommerce: WooCommerceService,
    product_limit: int = 5,
    currency: str = settings.DISPLAY_CURRENCY,
) -> DiagnosticReport:
    """
    Проверяет WordPress, настройки магазина и каталог WooCommerce.
    Запросы независимы и выполняются параллельно; ошибки API собираются в errors.
    """
    connection, store_info, products = await asyncio.gather(
        wordpress.test_connection(),
        wordpress.get_store_info(),
        woocommerce.get_products(per_page=product_limit),
        return_exceptions=True,
    )

    report = DiagnosticReport()
    errors: List[str] = []
    for result, message in (
        (connection, CONNECTION_FAILED),
        (store_info, STORE_INFO_FAILED),
        (products, PRODUCTS_FAILED),
    ):
        if isinstance(result, ApiClientError):
            logger.warning(f"Diagnostics: {message}: {result}")
            errors.append(message)
        elif isinstance(result, BaseException):
            raise result

    if not isinstance(connection, BaseException):
        report.connection = connection
    if not isinstance(store_info, BaseException):
        report.store_info = store_info
    if not isinstance(products, BaseException):
        report.products = [summarize_product(p, currency) for p in products]
    report.errors = errors
    logger.info(f"Diagnostics finished with {len(errors)} error(s)")
    return report
