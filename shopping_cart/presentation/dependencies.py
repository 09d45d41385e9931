"""Dependency container."""
from __future__ import annotations

import logging
import os

from shopping_cart.domain.ports import CartRepository, ProductCatalog
from shopping_cart.infrastructure import InMemoryCartRepository, InMemoryProductCatalog

from .currency import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    LOCALE_FORMATS,
    CurrencyFormatter,
    currency_formatter,
    is_valid_currency_code,
)

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "shopping_cart"


def configure_logging() -> None:
    """Apply SHOP_LOG_LEVEL to the package logger (root handlers are left alone)."""
    level_name = os.environ.get("SHOP_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning("Unknown SHOP_LOG_LEVEL=%s, using INFO", level_name)
        level = logging.INFO
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


class Dependencies:
    """Holds the collaborators of the presentation layer.

    Everything is created lazily on first access. SHOP_LOCALE and
    SHOP_CURRENCY select the currency formatter.
    """

    _cart_repository: CartRepository | None = None
    _product_catalog: ProductCatalog | None = None
    _currency_formatter: CurrencyFormatter | None = None

    @classmethod
    def get_cart_repository(cls) -> CartRepository:
        """Return the cart repository."""
        if cls._cart_repository is None:
            cls._cart_repository = InMemoryCartRepository()
        return cls._cart_repository

    @classmethod
    def get_product_catalog(cls) -> ProductCatalog:
        """Return the product catalog."""
        if cls._product_catalog is None:
            cls._product_catalog = InMemoryProductCatalog()
        return cls._product_catalog

    @classmethod
    def get_currency_formatter(cls) -> CurrencyFormatter:
        """Return the currency formatter."""
        if cls._currency_formatter is None:
            locale = os.environ.get("SHOP_LOCALE", DEFAULT_LOCALE)
            currency = os.environ.get("SHOP_CURRENCY", DEFAULT_CURRENCY)
            if locale not in LOCALE_FORMATS:
                logger.warning("Unknown SHOP_LOCALE=%s, falling back to %s", locale, DEFAULT_LOCALE)
                locale = DEFAULT_LOCALE
            if not is_valid_currency_code(currency):
                logger.warning("Invalid SHOP_CURRENCY=%s, falling back to %s", currency, DEFAULT_CURRENCY)
                currency = DEFAULT_CURRENCY
            cls._currency_formatter = currency_formatter(locale, currency)
        return cls._currency_formatter

    @classmethod
    def set_cart_repository(cls, repository: CartRepository) -> None:
        """Set the cart repository (for tests)."""
        cls._cart_repository = repository

    @classmethod
    def set_product_catalog(cls, catalog: ProductCatalog) -> None:
        """Set the product catalog (for tests)."""
        cls._product_catalog = catalog

    @classmethod
    def set_currency_formatter(cls, formatter: CurrencyFormatter) -> None:
        """Set the currency formatter (for tests)."""
        cls._currency_formatter = formatter

    @classmethod
    def reset(cls) -> None:
        """Reset every dependency (for tests)."""
        cls._cart_repository = None
        cls._product_catalog = None
        cls._currency_formatter = None
