"""Shared test fixtures"""
import httpx
import pytest

from storefront.services.http import WooCommerceClient, WordPressClient
from storefront.services.woocommerce import WooCommerceService
from storefront.services.wordpress import WordPressService

SITE_URL = "http://shop.test"


def product_payload(product_id: int = 1, **overrides) -> dict:
    """Product as WooCommerce returns it (trimmed)."""
    data = {
        "id": product_id,
        "name": f"Product {product_id}",
        "slug": f"product-{product_id}",
        "permalink": f"{SITE_URL}/product/product-{product_id}/",
        "type": "simple",
        "status": "publish",
        "featured": False,
        "description": "<p>Soft <strong>merino</strong> wool</p>",
        "short_description": "",
        "sku": f"SKU-{product_id}",
        "price": "100.00",
        "regular_price": "100.00",
        "sale_price": "",
        "on_sale": False,
        "stock_status": "instock",
        "stock_quantity": 10,
        "images": [
            {"id": 10 + product_id, "src": f"{SITE_URL}/img/{product_id}.jpg", "name": "front", "alt": ""}
        ],
        "categories": [{"id": 3, "name": "Sweaters", "slug": "sweaters"}],
        "attributes": [{"id": 1, "name": "Size", "options": ["S", "M", "L"]}],
    }
    data.update(overrides)
    return data


class RecordingHandler:
    """Handler for httpx.MockTransport that records requests and replies from a route map."""

    def __init__(self, routes=None, default=None):
        self.routes = routes or {}
        self.default = default
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path), self.default)
        if route is None:
            return httpx.Response(404, json={"code": "rest_no_route", "message": "No route was found", "data": {"status": 404}})
        if callable(route):
            return route(request)
        return route

    def paths(self):
        return [r.url.path for r in self.requests]


@pytest.fixture
def product_factory():
    return product_payload


@pytest.fixture
def catalog_handler():
    return RecordingHandler()


@pytest.fixture
def content_handler():
    return RecordingHandler()


@pytest.fixture
def catalog_client(catalog_handler):
    return WooCommerceClient(
        SITE_URL,
        consumer_key="ck_test",
        consumer_secret="cs_test",
        transport=httpx.MockTransport(catalog_handler),
    )


@pytest.fixture
def content_client(content_handler):
    return WordPressClient(SITE_URL, transport=httpx.MockTransport(content_handler))


@pytest.fixture
def woocommerce_service(catalog_client, content_client):
    return WooCommerceService(catalog_client, content_client)


@pytest.fixture
def wordpress_service(content_client):
    return WordPressService(content_client)
