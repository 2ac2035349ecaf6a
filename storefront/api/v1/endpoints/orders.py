# storefront/api/v1/endpoints/orders.py
import logging
from fastapi import APIRouter, Depends, status
from typing import Any, Dict

from storefront.services.woocommerce import WooCommerceService
from storefront.dependencies import get_woocommerce_service
from storefront.models.order import OrderCreate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/",
    summary="Создать новый заказ",
    description="Передает заказ в WooCommerce. Повторный запрос создаст еще один заказ.",
    status_code=status.HTTP_201_CREATED,
)
async def create_new_order(
    payload: OrderCreate,
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
) -> Dict[str, Any]:
    created_order = await wc_service.create_order(payload)
    logger.info(f"Order ID {created_order.get('id')} created via API.")
    return created_order
