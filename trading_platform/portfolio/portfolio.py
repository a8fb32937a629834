"""
Portfolio management for cash and share holdings.
"""

import logging
import math
from collections.abc import Mapping
from typing import Callable, Dict, List, Optional, Union

from ..core.models import Trade, TradeResult, Valuation, ValuationLine
from ..core.types import TradeSide
from ..core.exceptions import (
    TradingPlatformError, InvalidQuantityError, InvalidPriceError, InsufficientFundsError,
    InsufficientSharesError, SymbolNotFoundError
)

logger = logging.getLogger(__name__)

PriceLookup = Union[Callable[[str], Optional[float]], Mapping[str, float]]


def _is_valid_quantity(quantity) -> bool:
    # bool is an int subclass but never a share count
    return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity > 0


def _is_valid_price(price) -> bool:
    # drifted prices can reach zero or below; NaN and infinities are never tradable
    return math.isfinite(price) and price > 0


class Portfolio:
    """Manages cash balance and share holdings"""

    def __init__(self, initial_balance: float):
        if not initial_balance > 0:
            raise ValueError("Initial balance must be positive")

        self.cash = float(initial_balance)
        self.initial_balance = float(initial_balance)
        self.holdings: Dict[str, int] = {}
        self.trades: List[Trade] = []

    def get_quantity(self, symbol: str) -> int:
        """Shares held for a symbol, zero if never bought"""
        return self.holdings.get(symbol, 0)

    def can_buy(self, symbol: str, quantity: int, price: float) -> bool:
        """Check if we have enough cash to buy"""
        if not _is_valid_quantity(quantity) or not _is_valid_price(price):
            return False
        return self.cash >= quantity * price

    def can_sell(self, symbol: str, quantity: int, price: Optional[float] = None) -> bool:
        """Check if we have enough shares to sell, and that the price is tradable if given"""
        if not _is_valid_quantity(quantity):
            return False
        if price is not None and not _is_valid_price(price):
            return False
        return self.get_quantity(symbol) >= quantity

    def execute_buy(self, symbol: str, quantity: int, price: float) -> Trade:
        """Execute a buy, raising on invalid quantity, invalid price or insufficient cash"""
        if not _is_valid_quantity(quantity):
            raise InvalidQuantityError(quantity)
        if not _is_valid_price(price):
            raise InvalidPriceError(symbol, price)

        cost = quantity * price
        if self.cash < cost:
            raise InsufficientFundsError(cost, self.cash)

        self.holdings[symbol] = self.get_quantity(symbol) + quantity
        self.cash -= cost
        return self._record(symbol, TradeSide.BUY, quantity, price)

    def execute_sell(self, symbol: str, quantity: int, price: float) -> Trade:
        """Execute a sell, raising on invalid quantity, invalid price or insufficient shares"""
        if not _is_valid_quantity(quantity):
            raise InvalidQuantityError(quantity)
        if not _is_valid_price(price):
            raise InvalidPriceError(symbol, price)

        held = self.get_quantity(symbol)
        if held < quantity:
            raise InsufficientSharesError(symbol, quantity, held)

        # Entry stays at zero rather than being removed
        self.holdings[symbol] = held - quantity
        self.cash += quantity * price
        return self._record(symbol, TradeSide.SELL, quantity, price)

    def buy(self, symbol: str, quantity: int, price: float) -> TradeResult:
        """Buy shares, reporting the outcome instead of raising"""
        try:
            return TradeResult.ok(self.execute_buy(symbol, quantity, price))
        except TradingPlatformError as e:
            logger.debug(f"Buy rejected for {symbol}: {e}")
            return TradeResult.failed(e)

    def sell(self, symbol: str, quantity: int, price: float) -> TradeResult:
        """Sell shares, reporting the outcome instead of raising"""
        try:
            return TradeResult.ok(self.execute_sell(symbol, quantity, price))
        except TradingPlatformError as e:
            logger.debug(f"Sell rejected for {symbol}: {e}")
            return TradeResult.failed(e)

    def valuation(self, lookup: PriceLookup) -> Valuation:
        """
        Value the portfolio at current prices.

        Args:
            lookup: callable returning the price for a symbol (or None), or a
                symbol -> price mapping

        Returns:
            Valuation with one line per priced holding. Held symbols the
            lookup cannot price are listed in ``unavailable`` and left out
            of the total.
        """
        lines = []
        unavailable = []
        for symbol, quantity in self.holdings.items():
            if quantity <= 0:
                continue

            price = self._resolve_price(lookup, symbol)
            if price is None:
                unavailable.append(symbol)
                continue
            lines.append(ValuationLine(symbol=symbol, quantity=quantity, price=price))

        if unavailable:
            logger.warning(f"No current price for held symbols: {', '.join(unavailable)}")

        return Valuation(lines=lines, cash=self.cash, unavailable=unavailable)

    def get_portfolio_value(self, lookup: PriceLookup) -> float:
        """Calculate total portfolio value using current market prices"""
        return self.valuation(lookup).total_value

    def get_pnl(self, lookup: PriceLookup) -> float:
        """Calculate total profit/loss vs initial balance"""
        return self.get_portfolio_value(lookup) - self.initial_balance

    @staticmethod
    def _resolve_price(lookup: PriceLookup, symbol: str) -> Optional[float]:
        if isinstance(lookup, Mapping):
            return lookup.get(symbol)
        try:
            return lookup(symbol)
        except (KeyError, SymbolNotFoundError):
            return None

    def _record(self, symbol: str, side: TradeSide, quantity: int, price: float) -> Trade:
        trade = Trade(symbol=symbol, side=side, quantity=quantity, price=price)
        self.trades.append(trade)
        logger.info(f"{side.value.upper()} {quantity} {symbol} @ ${price:.2f} | cash ${self.cash:.2f}")
        return trade

    def __str__(self) -> str:
        active_positions = len([q for q in self.holdings.values() if q > 0])
        return f"Portfolio(Cash: ${self.cash:.2f}, Positions: {active_positions}, Trades: {len(self.trades)})"

    def __repr__(self) -> str:
        return self.__str__()
