"""
Stock market with a fixed catalog and randomly drifting prices.
"""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from ..config.settings import DEFAULT_CATALOG, DEFAULT_MAX_PRICE_CHANGE
from ..core.models import Instrument
from ..core.exceptions import SymbolNotFoundError

logger = logging.getLogger(__name__)


class Market:
    """Owns the instrument catalog and produces random price ticks"""

    def __init__(self, catalog: Optional[Mapping[str, float]] = None,
                 max_price_change: float = DEFAULT_MAX_PRICE_CHANGE,
                 rng: Optional[np.random.Generator] = None):
        if not max_price_change > 0:
            raise ValueError("Max price change must be positive")

        self.max_price_change = max_price_change
        self._seed_catalog: Dict[str, float] = dict(catalog if catalog is not None else DEFAULT_CATALOG)
        self._rng = rng if rng is not None else np.random.default_rng()
        self._instruments: Dict[str, Instrument] = {}
        self.initialize()

    def initialize(self) -> None:
        """Reset the catalog to the starting symbol -> price set"""
        self._instruments = {
            symbol: Instrument(symbol=symbol, price=float(price))
            for symbol, price in self._seed_catalog.items()
        }
        logger.debug(f"Market initialized with {len(self._instruments)} symbols")

    def update_prices(self) -> Dict[str, float]:
        """
        Move every price by a uniform random delta in [-max_price_change, max_price_change).

        Prices are not clamped and can reach zero or below after enough
        negative ticks.

        Returns:
            Mapping of symbol to the delta that was applied
        """
        if not self._instruments:
            return {}

        deltas = self._rng.uniform(-self.max_price_change, self.max_price_change,
                                   size=len(self._instruments))
        applied = {}
        for (symbol, instrument), delta in zip(list(self._instruments.items()), deltas):
            delta = float(delta)
            self._instruments[symbol] = Instrument(symbol=symbol, price=instrument.price + delta)
            applied[symbol] = delta

        logger.debug("Prices updated: " + ", ".join(f"{s} {d:+.2f}" for s, d in applied.items()))
        return applied

    def get_instrument(self, symbol: str) -> Optional[Instrument]:
        """Get the instrument for a symbol, or None if it is not listed"""
        return self._instruments.get(symbol)

    def require_instrument(self, symbol: str) -> Instrument:
        """Get the instrument for a symbol, raising SymbolNotFoundError if unlisted"""
        instrument = self._instruments.get(symbol)
        if instrument is None:
            raise SymbolNotFoundError(symbol)
        return instrument

    def price_of(self, symbol: str) -> Optional[float]:
        """Current price for a symbol, or None. Usable as a valuation lookup."""
        instrument = self._instruments.get(symbol)
        return instrument.price if instrument is not None else None

    def snapshot(self) -> List[Tuple[str, float]]:
        """Current (symbol, price) pairs in catalog order"""
        return [(symbol, instrument.price) for symbol, instrument in self._instruments.items()]

    def to_frame(self) -> pd.DataFrame:
        """Snapshot as a table with symbol and price columns"""
        return pd.DataFrame(self.snapshot(), columns=['symbol', 'price'])

    @property
    def symbols(self) -> List[str]:
        """Listed symbols in catalog order"""
        return list(self._instruments)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._instruments

    def __len__(self) -> int:
        return len(self._instruments)

    def __str__(self) -> str:
        return f"Market(Symbols: {len(self._instruments)})"

    def __repr__(self) -> str:
        return self.__str__()
