"""
Configuration settings for the trading platform.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Optional
import os
import json
import math

from ..core.exceptions import ConfigurationError


DEFAULT_INITIAL_CASH = 10000.0
DEFAULT_MAX_PRICE_CHANGE = 5.0
DEFAULT_CATALOG: Dict[str, float] = {
    'AAPL': 150.0,
    'GOOGL': 2800.0,
    'AMZN': 3400.0,
    'MSFT': 290.0,
}


def _is_positive_number(value) -> bool:
    # rejects bools, NaN and infinities
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


@dataclass
class TradingConfig:
    """Settings for a single trading session"""
    initial_cash: float = DEFAULT_INITIAL_CASH
    catalog: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_CATALOG))
    max_price_change: float = DEFAULT_MAX_PRICE_CHANGE  # ticks move prices within [-x, x)
    seed: Optional[int] = None

    def validate(self) -> 'TradingConfig':
        """Check values and return self, raising ConfigurationError on bad input"""
        if not _is_positive_number(self.initial_cash):
            raise ConfigurationError("Initial cash must be positive")
        if not isinstance(self.catalog, dict):
            raise ConfigurationError("Catalog must map symbols to prices")
        if not self.catalog:
            raise ConfigurationError("Catalog must contain at least one symbol")
        for symbol, price in self.catalog.items():
            if not isinstance(symbol, str) or not symbol.strip():
                raise ConfigurationError("Catalog symbols cannot be empty")
            if not _is_positive_number(price):
                raise ConfigurationError(f"Initial price for {symbol} must be positive")
        if not _is_positive_number(self.max_price_change):
            raise ConfigurationError("Max price change must be positive")
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise ConfigurationError("Seed must be an integer")
        return self

    @classmethod
    def from_file(cls, config_path: str) -> 'TradingConfig':
        """Load configuration from JSON file"""
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
            return cls(**data).validate()
        except (OSError, json.JSONDecodeError, TypeError) as e:
            raise ConfigurationError(f"Failed to load trading config from {config_path}: {e}")

    def save_to_file(self, config_path: str):
        """Save configuration to JSON file"""
        config_dict = {k: v for k, v in asdict(self).items() if v is not None}

        with open(config_path, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def from_env(cls) -> 'TradingConfig':
        """Create configuration from environment variables"""
        try:
            catalog_str = os.getenv('TRADING_CATALOG')
            catalog = parse_catalog(catalog_str) if catalog_str else dict(DEFAULT_CATALOG)
            seed = os.getenv('TRADING_SEED')

            return cls(
                initial_cash=float(os.getenv('TRADING_INITIAL_CASH', str(DEFAULT_INITIAL_CASH))),
                catalog=catalog,
                max_price_change=float(os.getenv('TRADING_MAX_PRICE_CHANGE', str(DEFAULT_MAX_PRICE_CHANGE))),
                seed=int(seed) if seed else None,
            ).validate()
        except ValueError as e:
            raise ConfigurationError(f"Invalid trading environment settings: {e}")


def parse_catalog(catalog_str: str) -> Dict[str, float]:
    """Parse 'AAPL:150,MSFT:290' into a symbol -> price mapping"""
    catalog = {}
    for entry in catalog_str.split(','):
        entry = entry.strip()
        if not entry:
            continue
        symbol, sep, price = entry.partition(':')
        if not sep:
            raise ValueError(f"Catalog entry '{entry}' must look like SYMBOL:PRICE")
        catalog[symbol.strip()] = float(price)
    return catalog


DEFAULT_CONFIG = TradingConfig()
