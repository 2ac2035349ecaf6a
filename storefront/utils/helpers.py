# storefront/utils/helpers.py
"""
Функции для отображения данных каталога. Без ввода-вывода,
работают только с уже полученными моделями.
"""
import re
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, getcontext, localcontext
from typing import Optional, Union

from babel.numbers import format_currency

from storefront.models.product import Category, Product, StockStatus

PLACEHOLDER_IMAGE = "/placeholder-product.jpg"
ZERO_PRICE = "$0.00"
PRICE_LOCALE = "en_CA"
MAX_PRICE_DIGITS = 1000

_TAG_RE = re.compile(r"<[^>]*>")

STOCK_STATUS_TEXT = {
    StockStatus.IN_STOCK.value: "In Stock",
    StockStatus.OUT_OF_STOCK.value: "Out of Stock",
    StockStatus.ON_BACKORDER.value: "On Backorder",
}


def parse_decimal(value: Union[str, int, float, Decimal, None]) -> Optional[Decimal]:
    """Decimal из строки или числа; None, если значение не является конечным числом."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(value if isinstance(value, (str, Decimal)) else str(value))
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount


def format_price(price: Union[str, int, float, Decimal, None], currency: str = "CAD") -> str:
    amount = parse_decimal(price)
    if amount is None:
        return ZERO_PRICE
    # babel округляет до копеек в текущем контексте Decimal, 28 знаков мало для 1e30
    precision = min(max(getcontext().prec, amount.adjusted() + 10), MAX_PRICE_DIGITS)
    try:
        with localcontext() as ctx:
            ctx.prec = precision
            return format_currency(amount, currency, locale=PRICE_LOCALE)
    except InvalidOperation:
        return ZERO_PRICE


def is_on_sale(product: Product) -> bool:
    return product.on_sale and product.sale_price != ""


def get_sale_percentage(regular_price: str, sale_price: str) -> int:
    if not sale_price:
        return 0
    regular = parse_decimal(regular_price)
    sale = parse_decimal(sale_price)
    if regular is None or sale is None or regular == 0:
        return 0
    percent = (regular - sale) / regular * 100
    # половина округляется вверх: 12.5 -> 13, -12.5 -> -12
    return int((percent + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def get_main_image(product: Product) -> str:
    if product.images:
        return product.images[0].src
    return PLACEHOLDER_IMAGE


def strip_html(html: str) -> str:
    # Не санитайзер: только удаляет теги простым шаблоном
    return _TAG_RE.sub("", html)


def get_product_url(product: Product) -> str:
    return f"/products/{product.slug}"


def get_category_url(category: Category) -> str:
    return f"/categories/{category.slug}"


def is_in_stock(product: Product) -> bool:
    return product.stock_status == StockStatus.IN_STOCK.value


def get_stock_status_text(product: Product) -> str:
    return STOCK_STATUS_TEXT.get(product.stock_status, "Unknown")
