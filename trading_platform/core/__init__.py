"""Core components of the trading platform."""

from .types import TradeSide, ErrorCode
from .models import Instrument, Trade, TradeResult, ValuationLine, Valuation
from .exceptions import (
    TradingPlatformError, InvalidQuantityError, InvalidPriceError, InsufficientFundsError,
    InsufficientSharesError, SymbolNotFoundError, PriceUnavailableError,
    ConfigurationError
)

__all__ = [
    'TradeSide', 'ErrorCode',
    'Instrument', 'Trade', 'TradeResult', 'ValuationLine', 'Valuation',
    'TradingPlatformError', 'InvalidQuantityError', 'InvalidPriceError', 'InsufficientFundsError',
    'InsufficientSharesError', 'SymbolNotFoundError', 'PriceUnavailableError',
    'ConfigurationError'
]
