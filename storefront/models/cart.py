# storefront/models/cart.py
from pydantic import BaseModel, Field


class CartItem(BaseModel):
    """Строка корзины на стороне клиента. Сервисы ее не заполняют."""
    id: int
    product_id: int
    name: str
    price: str
    quantity: int = Field(..., gt=0)
    image: str = ""
    slug: str
