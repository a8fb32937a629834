"""
Core type definitions for the trading platform.
Contains all enums shared across components.
"""

from enum import Enum


class TradeSide(Enum):
    """Side of a trade - buy or sell"""
    BUY = "buy"
    SELL = "sell"


class ErrorCode(Enum):
    """Reasons a trade or valuation can be rejected"""
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PRICE = "invalid_price"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INSUFFICIENT_SHARES = "insufficient_shares"
    SYMBOL_NOT_FOUND = "symbol_not_found"
    PRICE_UNAVAILABLE = "price_unavailable"
