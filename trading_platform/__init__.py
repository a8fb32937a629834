"""
Trading Platform - A toy stock trading session simulator.

This package provides:
- A market with a fixed catalog and randomly drifting prices
- A portfolio of cash and share holdings with guarded buy/sell
- A session object tying both together
- A text menu for interactive trading
"""

__version__ = "1.0.0"
__author__ = "Trading Platform Team"

from .core.types import TradeSide, ErrorCode
from .core.models import Instrument, Trade, TradeResult, ValuationLine, Valuation
from .core.exceptions import (
    TradingPlatformError, InvalidQuantityError, InvalidPriceError, InsufficientFundsError,
    InsufficientSharesError, SymbolNotFoundError, PriceUnavailableError,
    ConfigurationError
)
from .config.settings import TradingConfig, DEFAULT_CONFIG
from .market.market import Market
from .portfolio.portfolio import Portfolio
from .trading.session import TradingSession


# Convenience factory functions
def create_session(initial_cash: float = 10000.0, seed: int = None) -> TradingSession:
    """Create a trading session with the default catalog"""
    return TradingSession.from_config(TradingConfig(initial_cash=initial_cash, seed=seed))


__all__ = [
    # Core types
    'TradeSide', 'ErrorCode',
    # Core models
    'Instrument', 'Trade', 'TradeResult', 'ValuationLine', 'Valuation',
    # Errors
    'TradingPlatformError', 'InvalidQuantityError', 'InvalidPriceError', 'InsufficientFundsError',
    'InsufficientSharesError', 'SymbolNotFoundError', 'PriceUnavailableError',
    'ConfigurationError',
    # Main components
    'TradingConfig', 'DEFAULT_CONFIG', 'Market', 'Portfolio', 'TradingSession',
    # Convenience functions
    'create_session'
]
