"""
Custom exceptions for the trading platform.
"""

from typing import List, Optional

from .types import ErrorCode


class TradingPlatformError(Exception):
    """Base exception for trading platform"""
    code: Optional[ErrorCode] = None


class InvalidQuantityError(TradingPlatformError):
    """Raised when a trade size is not a positive integer"""
    code = ErrorCode.INVALID_QUANTITY

    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__(f"Invalid quantity: {quantity!r} (must be a positive integer)")


class InvalidPriceError(TradingPlatformError):
    """Raised when a trade is priced at zero or below"""
    code = ErrorCode.INVALID_PRICE

    def __init__(self, symbol: str, price: float):
        self.symbol = symbol
        self.price = price
        super().__init__(f"Cannot trade {symbol} at ${price:.2f}: price must be positive")


class InsufficientFundsError(TradingPlatformError):
    """Raised when attempting to buy with insufficient funds"""
    code = ErrorCode.INSUFFICIENT_FUNDS

    def __init__(self, required: float, available: float):
        self.required = required
        self.available = available
        super().__init__(f"Insufficient funds: need ${required:.2f}, have ${available:.2f}")


class InsufficientSharesError(TradingPlatformError):
    """Raised when attempting to sell more shares than available"""
    code = ErrorCode.INSUFFICIENT_SHARES

    def __init__(self, symbol: str, requested: int, available: int):
        self.symbol = symbol
        self.requested = requested
        self.available = available
        super().__init__(f"Insufficient shares of {symbol}: need {requested}, have {available}")


class SymbolNotFoundError(TradingPlatformError):
    """Raised when a symbol is not in the market catalog"""
    code = ErrorCode.SYMBOL_NOT_FOUND

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Stock symbol not found: {symbol}")


class PriceUnavailableError(TradingPlatformError):
    """Raised when held symbols cannot be priced during valuation"""
    code = ErrorCode.PRICE_UNAVAILABLE

    def __init__(self, symbols: List[str]):
        self.symbols = list(symbols)
        super().__init__(f"No current price for: {', '.join(self.symbols)}")


class ConfigurationError(TradingPlatformError):
    """Raised for invalid configuration values"""
    pass
