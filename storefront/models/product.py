# storefront/models/product.py
from enum import Enum
from pydantic import BaseModel, field_validator
from typing import List, Optional


class StockStatus(str, Enum):
    """Значения stock_status, которые отдает WooCommerce."""
    IN_STOCK = "instock"
    OUT_OF_STOCK = "outofstock"
    ON_BACKORDER = "onbackorder"


class ProductImage(BaseModel):
    id: Optional[int] = None
    src: str
    name: str = ""
    alt: str = ""


class CategoryRef(BaseModel):
    """Ссылка на категорию внутри товара."""
    id: int
    name: str = ""
    slug: str = ""


class ProductAttribute(BaseModel):
    id: int = 0
    name: str
    options: List[str] = []


class ProductExtraFields(BaseModel):
    """Дополнительные поля, которые добавляет headless-плагин."""
    size_guide_url: str = ""
    material: str = ""
    care_instructions: str = ""
    sustainability_info: str = ""


class GalleryImage(BaseModel):
    id: Optional[int] = None
    url: str
    thumbnail: str = ""
    medium: str = ""
    alt: str = ""


class Product(BaseModel):
    id: int
    name: str
    slug: str
    type: str = "simple"
    status: str = "publish"
    featured: bool = False
    description: str = ""
    short_description: str = ""
    sku: str = ""
    # Цены приходят строками, пустая строка = цена не задана
    price: str = ""
    regular_price: str = ""
    sale_price: str = ""
    on_sale: bool = False
    stock_status: str = StockStatus.IN_STOCK.value
    stock_quantity: Optional[int] = None
    images: List[ProductImage] = []
    categories: List[CategoryRef] = []
    attributes: List[ProductAttribute] = []
    extra_fields: Optional[ProductExtraFields] = None
    gallery_images: Optional[List[GalleryImage]] = None

    @field_validator(
        'description', 'short_description', 'sku',
        'price', 'regular_price', 'sale_price',
        mode='before',
    )
    @classmethod
    def none_to_empty(cls, value):
        if value is None:
            return ""
        # WooCommerce иногда отдает числа вместо строк
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class CategoryImage(BaseModel):
    id: Optional[int] = None
    src: str
    alt: str = ""


class Category(BaseModel):
    id: int
    name: str
    slug: str
    description: str = ""
    image: Optional[CategoryImage] = None
    count: int = 0
