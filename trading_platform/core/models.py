"""
Core data models for the trading platform.
Contains all dataclasses and model definitions.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from datetime import datetime
import uuid

import pandas as pd

from .types import TradeSide, ErrorCode
from .exceptions import TradingPlatformError, PriceUnavailableError


@dataclass(frozen=True)
class Instrument:
    """A tradable symbol and its price at the time it was read"""
    symbol: str
    price: float


@dataclass
class Trade:
    """Represents an executed trade"""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    symbol: str = ""
    side: TradeSide = TradeSide.BUY
    quantity: int = 0
    price: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def value(self) -> float:
        """Cash moved by this trade"""
        return self.quantity * self.price


@dataclass
class TradeResult:
    """Outcome of a buy or sell request"""
    success: bool
    trade: Optional[Trade] = None
    error: Optional[TradingPlatformError] = None

    @classmethod
    def ok(cls, trade: Trade) -> 'TradeResult':
        return cls(success=True, trade=trade)

    @classmethod
    def failed(cls, error: TradingPlatformError) -> 'TradeResult':
        return cls(success=False, error=error)

    @property
    def error_code(self) -> Optional[ErrorCode]:
        return self.error.code if self.error is not None else None

    @property
    def message(self) -> str:
        """Human readable summary for display"""
        if self.success:
            verb = "Bought" if self.trade.side == TradeSide.BUY else "Sold"
            return f"{verb} {self.trade.quantity} shares of {self.trade.symbol}"
        return str(self.error)

    def __bool__(self) -> bool:
        return self.success


@dataclass
class ValuationLine:
    """One priced holding inside a valuation"""
    symbol: str
    quantity: int
    price: float

    @property
    def value(self) -> float:
        return self.quantity * self.price


@dataclass
class Valuation:
    """Portfolio worth at current prices.

    Holdings whose price could not be resolved are left out of ``lines`` and
    ``total_value`` and listed in ``unavailable`` instead.
    """
    lines: List[ValuationLine]
    cash: float
    unavailable: List[str] = field(default_factory=list)

    @property
    def holdings_value(self) -> float:
        return sum(line.value for line in self.lines)

    @property
    def total_value(self) -> float:
        return self.cash + self.holdings_value

    @property
    def is_complete(self) -> bool:
        return not self.unavailable

    def raise_for_unavailable(self) -> None:
        """Raise PriceUnavailableError if any holding went unpriced"""
        if self.unavailable:
            raise PriceUnavailableError(self.unavailable)

    def to_frame(self) -> pd.DataFrame:
        """Priced holdings as a table with symbol, quantity, price, value columns"""
        return pd.DataFrame(
            [(line.symbol, line.quantity, line.price, line.value) for line in self.lines],
            columns=['symbol', 'quantity', 'price', 'value'],
        )
