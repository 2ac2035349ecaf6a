# storefront/models/diagnostics.py
from pydantic import BaseModel, computed_field
from typing import List, Optional

from storefront.models.store import ConnectionStatus, StoreInfo


class ProductSummary(BaseModel):
    id: int
    name: str
    image: str
    price: str
    stock: str
    sale_percentage: Optional[int] = None


class DiagnosticReport(BaseModel):
    connection: Optional[ConnectionStatus] = None
    store_info: Optional[StoreInfo] = None
    products: List[ProductSummary] = []
    errors: List[str] = []

    @computed_field
    @property
    def ok(self) -> bool:
        return not self.errors
