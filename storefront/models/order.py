# storefront/models/order.py
from pydantic import BaseModel, Field
from typing import Any, Dict, List


class LineItemCreate(BaseModel):
    product_id: int
    quantity: int = Field(..., gt=0)


class OrderCreate(BaseModel):
    """Тело POST /orders. billing и shipping передаются в WooCommerce без изменений."""
    payment_method: str
    payment_method_title: str
    set_paid: bool = False
    billing: Dict[str, Any] = {}
    shipping: Dict[str, Any] = {}
    line_items: List[LineItemCreate] = Field(..., min_length=1)
