# storefront/api/v1/endpoints/categories.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from storefront.services.woocommerce import WooCommerceService
from storefront.dependencies import get_woocommerce_service
from storefront.models.product import Category, Product
from storefront.models.query import CategoryQuery, PageOptions

router = APIRouter()


@router.get(
    "/",
    response_model=List[Category],
    summary="Получить список категорий",
    description="Получает список категорий товаров из WooCommerce.",
)
async def get_categories_list(
    per_page: Optional[int] = Query(None, ge=1, le=100),
    hide_empty: Optional[bool] = Query(None, description="Скрыть пустые категории"),
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
):
    return await wc_service.get_categories(CategoryQuery(per_page=per_page, hide_empty=hide_empty))


@router.get("/{category_id}/products", response_model=List[Product], summary="Товары категории")
async def get_category_products(
    category_id: int,
    page: Optional[int] = Query(None, ge=1),
    per_page: Optional[int] = Query(None, ge=1, le=100),
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
):
    return await wc_service.get_products_by_category(category_id, PageOptions(page=page, per_page=per_page))
