# storefront/api/v1/endpoints/store.py
from fastapi import APIRouter, Depends
from typing import Any, Dict, List

from storefront.services.wordpress import WordPressService
from storefront.dependencies import get_wordpress_service
from storefront.models.store import ConnectionStatus, StoreInfo

router = APIRouter()


@router.get("/connection", response_model=ConnectionStatus, summary="Проверка соединения с WordPress")
async def test_connection(wp_service: WordPressService = Depends(get_wordpress_service)):
    return await wp_service.test_connection()


@router.get("/info", response_model=StoreInfo, summary="Информация о магазине")
async def get_store_info(wp_service: WordPressService = Depends(get_wordpress_service)):
    return await wp_service.get_store_info()


@router.get("/testimonials", summary="Отзывы")
async def get_testimonials(
    wp_service: WordPressService = Depends(get_wordpress_service),
) -> List[Dict[str, Any]]:
    return await wp_service.get_testimonials()


@router.get("/faqs", summary="Вопросы и ответы")
async def get_faqs(
    wp_service: WordPressService = Depends(get_wordpress_service),
) -> List[Dict[str, Any]]:
    return await wp_service.get_faqs()
