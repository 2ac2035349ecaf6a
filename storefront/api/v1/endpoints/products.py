# storefront/api/v1/endpoints/products.py
import logging
from fastapi import APIRouter, Depends, Query, HTTPException, status
from typing import List, Literal, Optional

from storefront.services.woocommerce import WooCommerceService
from storefront.dependencies import get_woocommerce_service
from storefront.models.product import Product
from storefront.models.query import ProductQuery

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/",
    response_model=List[Product],
    summary="Получить список товаров",
    description="Список товаров из WooCommerce в порядке сервера. Пагинация через page/per_page.",
)
async def get_products_list(
    page: Optional[int] = Query(None, ge=1, description="Номер страницы"),
    per_page: Optional[int] = Query(None, ge=1, le=100, description="Количество товаров на странице"),
    category: Optional[int] = Query(None, description="ID категории"),
    search: Optional[str] = Query(None, description="Поисковый запрос"),
    featured: Optional[bool] = Query(None, description="Фильтр по избранным"),
    on_sale: Optional[bool] = Query(None, description="Фильтр по товарам со скидкой"),
    orderby: Optional[str] = Query(None, description="Поле сортировки (date, id, title, price...)"),
    order: Optional[Literal['asc', 'desc']] = Query(None, description="Направление сортировки"),
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
):
    query = ProductQuery(
        page=page, per_page=per_page, category=category, search=search,
        featured=featured, on_sale=on_sale, orderby=orderby, order=order,
    )
    return await wc_service.get_products(query)


@router.get("/featured", response_model=List[Product], summary="Избранные товары")
async def get_featured_products(
    limit: int = Query(8, ge=1, le=100),
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
):
    return await wc_service.get_featured_products(limit=limit)


@router.get("/search", response_model=List[Product], summary="Поиск товаров")
async def search_products(
    q: str = Query(..., min_length=1, description="Поисковый запрос"),
    limit: int = Query(20, ge=1, le=100),
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
):
    return await wc_service.search_products(q, limit=limit)


@router.get("/slug/{slug}", response_model=Product, summary="Получить товар по slug")
async def get_product_by_slug(
    slug: str,
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
):
    product = await wc_service.get_product_by_slug(slug)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Товар '{slug}' не найден.")
    return product


@router.get(
    "/{product_id}",
    response_model=Product,
    summary="Получить товар по ID",
    description="Получает детальную информацию о конкретном товаре.",
)
async def get_product_details(
    product_id: int,
    wc_service: WooCommerceService = Depends(get_woocommerce_service),
):
    return await wc_service.get_product(product_id)
