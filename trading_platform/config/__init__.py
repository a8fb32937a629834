"""Configuration for trading sessions."""

from .settings import (
    TradingConfig, DEFAULT_CONFIG, DEFAULT_CATALOG,
    DEFAULT_INITIAL_CASH, DEFAULT_MAX_PRICE_CHANGE, parse_catalog
)

__all__ = [
    'TradingConfig', 'DEFAULT_CONFIG', 'DEFAULT_CATALOG',
    'DEFAULT_INITIAL_CASH', 'DEFAULT_MAX_PRICE_CHANGE', 'parse_catalog'
]
