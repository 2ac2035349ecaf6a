# storefront/models/query.py
from pydantic import BaseModel, Field
from typing import Any, Dict, Literal, Optional


class QueryModel(BaseModel):
    def to_params(self) -> Dict[str, Any]:
        """Параметры запроса без незаданных опций."""
        return self.model_dump(exclude_none=True)


class ProductQuery(QueryModel):
    per_page: Optional[int] = Field(None, ge=1, le=100)
    page: Optional[int] = Field(None, ge=1)
    category: Optional[int] = None
    featured: Optional[bool] = None
    on_sale: Optional[bool] = None
    search: Optional[str] = None
    orderby: Optional[str] = None
    order: Optional[Literal['asc', 'desc']] = None
    slug: Optional[str] = None


class CategoryQuery(QueryModel):
    per_page: Optional[int] = Field(None, ge=1, le=100)
    hide_empty: Optional[bool] = None


class PageOptions(QueryModel):
    per_page: Optional[int] = Field(None, ge=1, le=100)
    page: Optional[int] = Field(None, ge=1)
