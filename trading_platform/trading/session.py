"""
Trading session that ties a market and a portfolio together.
"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..config.settings import TradingConfig
from ..market.market import Market
from ..portfolio.portfolio import Portfolio
from ..core.models import TradeResult, Valuation
from ..core.exceptions import SymbolNotFoundError

logger = logging.getLogger(__name__)


class TradingSession:
    """Owns one market and one portfolio, and routes trades at market prices"""

    def __init__(self, market: Market, portfolio: Portfolio):
        self.market = market
        self.portfolio = portfolio

    @classmethod
    def from_config(cls, config: Optional[TradingConfig] = None) -> 'TradingSession':
        """Build a session from configuration, using defaults if none is given"""
        config = (config or TradingConfig()).validate()
        market = Market(
            catalog=config.catalog,
            max_price_change=config.max_price_change,
            rng=np.random.default_rng(config.seed),
        )
        logger.info(f"Session started with ${config.initial_cash:,.2f} and {len(market)} symbols")
        return cls(market, Portfolio(config.initial_cash))

    def buy(self, symbol: str, quantity: int) -> TradeResult:
        """Buy at the current market price"""
        instrument = self.market.get_instrument(symbol)
        if instrument is None:
            return TradeResult.failed(SymbolNotFoundError(symbol))
        return self.portfolio.buy(symbol, quantity, instrument.price)

    def sell(self, symbol: str, quantity: int) -> TradeResult:
        """Sell at the current market price"""
        instrument = self.market.get_instrument(symbol)
        if instrument is None:
            return TradeResult.failed(SymbolNotFoundError(symbol))
        return self.portfolio.sell(symbol, quantity, instrument.price)

    def update_prices(self) -> Dict[str, float]:
        """Apply one random price tick to the market and return the deltas"""
        return self.market.update_prices()

    def market_snapshot(self) -> List[Tuple[str, float]]:
        """Current (symbol, price) pairs"""
        return self.market.snapshot()

    def valuation(self) -> Valuation:
        """Value the portfolio at current market prices"""
        return self.portfolio.valuation(self.market.price_of)

    def __str__(self) -> str:
        return f"TradingSession({self.market}, {self.portfolio})"

    def __repr__(self) -> str:
        return self.__str__()
