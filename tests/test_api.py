"""Tests for the HTTP endpoints with mocked services"""
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.dependencies import get_woocommerce_service, get_wordpress_service
from storefront.main import app
from storefront.models.product import Category, Product
from storefront.models.query import CategoryQuery, PageOptions, ProductQuery
from storefront.models.store import ConnectionStatus, StoreInfo
from storefront.services.http import WooCommerceServiceError, WordPressServiceError
from storefront.services.woocommerce import WooCommerceService
from storefront.services.wordpress import WordPressService


@pytest.fixture
def wc_service():
    return AsyncMock(spec=WooCommerceService)


@pytest.fixture
def wp_service():
    return AsyncMock(spec=WordPressService)


@pytest.fixture
def client(wc_service, wp_service):
    app.dependency_overrides[get_woocommerce_service] = lambda: wc_service
    app.dependency_overrides[get_wordpress_service] = lambda: wp_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def sweater(product_id=1):
    return Product(id=product_id, name="Sweater", slug=f"sweater-{product_id}", price="99.00")


class TestRoot:

    def test_health_check(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestProductEndpoints:

    def test_list_products_passes_filters(self, client, wc_service):
        wc_service.get_products.return_value = [sweater(1), sweater(2)]

        response = client.get("/api/v1/products/", params={"per_page": 2, "featured": "true", "order": "asc"})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [1, 2]
        wc_service.get_products.assert_awaited_once_with(ProductQuery(per_page=2, featured=True, order="asc"))

    def test_list_products_rejects_bad_order(self, client):
        response = client.get("/api/v1/products/", params={"order": "sideways"})
        assert response.status_code == 422

    def test_product_by_id(self, client, wc_service):
        wc_service.get_product.return_value = sweater(42)

        response = client.get("/api/v1/products/42")

        assert response.status_code == 200
        assert response.json()["slug"] == "sweater-42"
        wc_service.get_product.assert_awaited_once_with(42)

    def test_upstream_not_found_maps_to_404(self, client, wc_service):
        wc_service.get_product.side_effect = WooCommerceServiceError("Ошибка WooCommerce API: Invalid ID.", status_code=404)

        response = client.get("/api/v1/products/404")

        assert response.status_code == 404
        assert "Invalid ID." in response.json()["detail"]

    def test_upstream_network_error_maps_to_503(self, client, wc_service):
        wc_service.get_products.side_effect = WooCommerceServiceError("network")

        response = client.get("/api/v1/products/")

        assert response.status_code == 503

    def test_upstream_success_status_with_bad_body_maps_to_502(self, client, wc_service):
        wc_service.get_products.side_effect = WooCommerceServiceError("Некорректный JSON", status_code=200)

        response = client.get("/api/v1/products/")

        assert response.status_code == 502

    def test_maintenance_page_from_catalog_maps_to_502(self, woocommerce_service, catalog_handler):
        catalog_handler.routes[("GET", "/wp-json/wc/v3/products")] = httpx.Response(200, text="<html>maintenance</html>")
        app.dependency_overrides[get_woocommerce_service] = lambda: woocommerce_service
        try:
            response = TestClient(app).get("/api/v1/products/")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 502
        assert "detail" in response.json()

    def test_product_by_slug_not_found(self, client, wc_service):
        wc_service.get_product_by_slug.return_value = None

        response = client.get("/api/v1/products/slug/missing")

        assert response.status_code == 404

    def test_product_by_slug(self, client, wc_service):
        wc_service.get_product_by_slug.return_value = sweater(5)

        response = client.get("/api/v1/products/slug/sweater-5")

        assert response.status_code == 200
        assert response.json()["id"] == 5

    def test_featured(self, client, wc_service):
        wc_service.get_featured_products.return_value = [sweater(3)]

        response = client.get("/api/v1/products/featured", params={"limit": 4})

        assert response.status_code == 200
        wc_service.get_featured_products.assert_awaited_once_with(limit=4)

    def test_search(self, client, wc_service):
        wc_service.search_products.return_value = []

        response = client.get("/api/v1/products/search", params={"q": "wool"})

        assert response.status_code == 200
        assert response.json() == []
        wc_service.search_products.assert_awaited_once_with("wool", limit=20)


class TestCategoryEndpoints:

    def test_list_categories(self, client, wc_service):
        wc_service.get_categories.return_value = [Category(id=3, name="Sweaters", slug="sweaters", count=4)]

        response = client.get("/api/v1/categories/", params={"hide_empty": "true"})

        assert response.status_code == 200
        assert response.json()[0]["count"] == 4
        wc_service.get_categories.assert_awaited_once_with(CategoryQuery(hide_empty=True))

    def test_category_products(self, client, wc_service):
        wc_service.get_products_by_category.return_value = [sweater(9)]

        response = client.get("/api/v1/categories/3/products", params={"page": 2})

        assert response.status_code == 200
        wc_service.get_products_by_category.assert_awaited_once_with(3, PageOptions(page=2))


class TestOrderEndpoint:

    ORDER = {
        "payment_method": "bacs",
        "payment_method_title": "Direct Bank Transfer",
        "set_paid": False,
        "billing": {"first_name": "Sam"},
        "shipping": {"first_name": "Sam"},
        "line_items": [{"product_id": 93, "quantity": 1}],
    }

    def test_create_order(self, client, wc_service):
        wc_service.create_order.return_value = {"id": 727, "status": "pending"}

        response = client.post("/api/v1/orders/", json=self.ORDER)

        assert response.status_code == 201
        assert response.json()["id"] == 727
        sent = wc_service.create_order.await_args.args[0]
        assert sent.line_items[0].product_id == 93

    def test_empty_cart_is_rejected(self, client, wc_service):
        response = client.post("/api/v1/orders/", json={**self.ORDER, "line_items": []})

        assert response.status_code == 422
        wc_service.create_order.assert_not_awaited()


class TestStoreEndpoints:

    def test_connection(self, client, wp_service):
        wp_service.test_connection.return_value = ConnectionStatus(wordpress_version="6.6.1", status="success")

        response = client.get("/api/v1/store/connection")

        assert response.status_code == 200
        assert response.json()["wordpress_version"] == "6.6.1"

    def test_store_info_failure(self, client, wp_service):
        wp_service.get_store_info.side_effect = WordPressServiceError("down", status_code=500)

        response = client.get("/api/v1/store/info")

        assert response.status_code == 500

    def test_store_info(self, client, wp_service):
        wp_service.get_store_info.return_value = StoreInfo(name="Northern Knits", currency="CAD")

        response = client.get("/api/v1/store/info")

        assert response.json()["currency"] == "CAD"

    def test_testimonials_and_faqs(self, client, wp_service):
        wp_service.get_testimonials.return_value = [{"id": 1}]
        wp_service.get_faqs.return_value = []

        assert client.get("/api/v1/store/testimonials").json() == [{"id": 1}]
        assert client.get("/api/v1/store/faqs").json() == []

    def test_testimonials_with_stray_items(self, wordpress_service, content_handler):
        content_handler.routes[("GET", "/wp-json/wp/v2/testimonial")] = httpx.Response(
            200, json=[{"id": 1}, "junk", 5, {"id": 2}])
        app.dependency_overrides[get_wordpress_service] = lambda: wordpress_service
        try:
            response = TestClient(app).get("/api/v1/store/testimonials")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.json() == [{"id": 1}, {"id": 2}]


class TestDiagnosticsEndpoint:

    def test_reports_errors(self, client, wp_service, wc_service):
        wp_service.test_connection.side_effect = WordPressServiceError("down")
        wp_service.get_store_info.return_value = StoreInfo(name="Northern Knits", currency="CAD")
        wc_service.get_products.return_value = [sweater(1)]

        response = client.get("/api/v1/diagnostics/")

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is False
        assert body["errors"] == ["WordPress connection failed"]
        assert body["products"][0]["price"] == "$99.00"
