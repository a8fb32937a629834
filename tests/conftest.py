"""
Pytest configuration and shared fixtures.
"""

import io

import numpy as np
import pytest

from trading_platform.config.settings import TradingConfig
from trading_platform.market.market import Market
from trading_platform.portfolio.portfolio import Portfolio
from trading_platform.trading.session import TradingSession
from trading_platform.cli.menu import TradingMenu


class FallingRng:
    """Generator stand-in that always draws the lowest delta"""

    def uniform(self, low, high, size=None):
        return np.full(size, low)


@pytest.fixture
def falling_rng():
    """Random source that pushes every price down by the full bound each tick"""
    return FallingRng()


@pytest.fixture
def sample_portfolio():
    """Create a sample portfolio for testing"""
    return Portfolio(initial_balance=10000.0)


@pytest.fixture
def sample_market():
    """Create a market with the default catalog and a fixed seed"""
    return Market(rng=np.random.default_rng(42))


@pytest.fixture
def sample_session(sample_market, sample_portfolio):
    """Create a trading session over the sample market and portfolio"""
    return TradingSession(sample_market, sample_portfolio)


@pytest.fixture
def seeded_config():
    """Default configuration with a fixed seed"""
    return TradingConfig(seed=7)


@pytest.fixture
def run_menu(sample_session):
    """Run the menu against scripted input and return everything it printed"""
    def _run(*lines):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        TradingMenu(sample_session, stdin=stdin, stdout=stdout).run()
        return stdout.getvalue()
    return _run
