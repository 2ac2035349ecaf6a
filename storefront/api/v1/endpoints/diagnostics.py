# storefront/api/v1/endpoints/diagnostics.py
from fastapi import APIRouter, Depends, Query

from storefront.core.config import settings
from storefront.dependencies import get_woocommerce_service, get_wordpress_service
from storefront.models.diagnostics import DiagnosticReport
from storefront.services.diagnostics import run_diagnostics
from storefront.services.woocommerce import WooCommerceService
from storefront.services.wordpress import WordPressService

router = APIRouter()


@router.get(
    "/",
    response_model=DiagnosticReport,
    summary="Проверка API",
    description="Проверяет соединение с WordPress, настройки магазина и выборку товаров WooCommerce.",
)
async def get_diagnostics(
    product_limit: int = Query(5, ge=1, le=100),
    wp_service: WordPressService = Depends(get_wordpress_service),
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
):
    return await run_diagnostics(
        wp_service, wc_service,
        product_limit=product_limit,
        currency=settings.DISPLAY_CURRENCY,
    )
