# storefront/dependencies.py
from fastapi import HTTPException, Request, status

from storefront.services.woocommerce import WooCommerceService
from storefront.services.wordpress import WordPressService


async def get_woocommerce_service(request: Request) -> WooCommerceService:
    service = getattr(request.app.state, 'woocommerce_service', None)
    if not service or not isinstance(service, WooCommerceService):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Сервис WooCommerce недоступен."
        )
    return service


async def get_wordpress_service(request: Request) -> WordPressService:
    service = getattr(request.app.state, 'wordpress_service', None)
    if not service or not isinstance(service, WordPressService):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Сервис WordPress недоступен."
        )
    return service
