"""Presentation layer module."""
from .currency import CurrencyFormatter, currency_formatter
from .dependencies import Dependencies
from .handlers import get_cart, handle_intent, start_session
from .renderer import render_cart, render_products

__all__ = [
    "CurrencyFormatter",
    "Dependencies",
    "currency_formatter",
    "get_cart",
    "handle_intent",
    "render_cart",
    "render_products",
    "start_session",
]
