# storefront/api/v1/router.py
from fastapi import APIRouter
from storefront.api.v1.endpoints import products, categories, orders, store, diagnostics

api_router_v1 = APIRouter()

api_router_v1.include_router(products.router, prefix="/products", tags=["Products"])
api_router_v1.include_router(categories.router, prefix="/categories", tags=["Categories"])
api_router_v1.include_router(orders.router, prefix="/orders", tags=["Orders"])
api_router_v1.include_router(store.router, prefix="/store", tags=["Store"])
api_router_v1.include_router(diagnostics.router, prefix="/diagnostics", tags=["Diagnostics"])
