# storefront/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from storefront.api.v1.router import api_router_v1
from storefront.core.config import settings
from storefront.core.logging_config import setup_logging
from storefront.services.http import ApiClientError, WooCommerceClient, WordPressClient
from storefront.services.woocommerce import WooCommerceService
from storefront.services.wordpress import WordPressService

log_level = setup_logging()
logger = logging.getLogger(__name__)
logger.info(f"Starting application with log level: {log_level}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup: Initializing HTTP clients and services...")
    catalog_client = WooCommerceClient(
        settings.WORDPRESS_URL,
        consumer_key=settings.WC_CONSUMER_KEY,
        consumer_secret=settings.WC_CONSUMER_SECRET,
        api_version=settings.WOOCOMMERCE_API_VERSION,
        timeout=settings.REQUEST_TIMEOUT,
    )
    content_client = WordPressClient(
        settings.WORDPRESS_URL,
        api_prefix=settings.WORDPRESS_API_PREFIX,
        timeout=settings.REQUEST_TIMEOUT,
    )
    app.state.woocommerce_service = WooCommerceService(catalog_client, content_client)
    app.state.wordpress_service = WordPressService(content_client)
    logger.info("Services initialized.")

    try:
        yield
    finally:
        logger.info("Application shutdown: Closing HTTP clients...")
        await catalog_client.aclose()
        await content_client.aclose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="API поверх WooCommerce и WordPress: каталог, контент магазина и диагностика.",
    lifespan=lifespan,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)


# --- Обработчики ошибок ---
@app.exception_handler(ApiClientError)
async def api_client_exception_handler(request: Request, exc: ApiClientError):
    status_code = exc.status_code or status.HTTP_503_SERVICE_UNAVAILABLE
    # Успешный статус с нечитаемым телом - это тоже сбой апстрима
    if status_code < 400:
        status_code = status.HTTP_502_BAD_GATEWAY
    logger.warning(f"Upstream API error {status_code}: {exc.message} for {request.method} {request.url}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Request validation error: {exc.errors()} for {request.method} {request.url}")
    return JSONResponse(
        status_code=422,
        content={"detail": "Ошибка валидации входных данных", "errors": jsonable_encoder(exc.errors())},
    )


app.include_router(api_router_v1, prefix=settings.API_V1_STR)


@app.get("/", tags=["Root"], summary="Health check")
async def read_root():
    """Простой эндпоинт для проверки работоспособности API."""
    return {"status": "ok", "project": settings.PROJECT_NAME}
