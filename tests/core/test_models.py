"""
Tests for core models.
"""

import dataclasses

import pytest

from trading_platform.core.models import Instrument, Trade, TradeResult, ValuationLine, Valuation
from trading_platform.core.types import TradeSide, ErrorCode
from trading_platform.core.exceptions import (
    InsufficientFundsError, InsufficientSharesError, InvalidQuantityError, InvalidPriceError,
    PriceUnavailableError, SymbolNotFoundError
)


class TestInstrument:
    def test_instrument_creation(self):
        """Test instrument creation"""
        instrument = Instrument('AAPL', 150.0)
        assert instrument.symbol == 'AAPL'
        assert instrument.price == 150.0

    def test_instrument_is_immutable(self):
        """Test instruments cannot be changed from outside the market"""
        instrument = Instrument('AAPL', 150.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            instrument.price = 1.0


class TestTrade:
    def test_trade_creation(self):
        """Test trade creation"""
        trade = Trade(symbol='AAPL', side=TradeSide.SELL, quantity=10, price=150.0)

        assert trade.symbol == 'AAPL'
        assert trade.side == TradeSide.SELL
        assert trade.value == 1500.0
        assert trade.id is not None


class TestTradeResult:
    def test_success_message(self):
        """Test success result reports the executed trade"""
        result = TradeResult.ok(Trade(symbol='MSFT', side=TradeSide.BUY, quantity=3, price=290.0))

        assert result
        assert result.error_code is None
        assert result.message == "Bought 3 shares of MSFT"

    def test_failure_carries_error_code(self):
        """Test failed result exposes the typed error"""
        result = TradeResult.failed(InsufficientSharesError('AAPL', 15, 10))

        assert not result
        assert result.trade is None
        assert result.error_code == ErrorCode.INSUFFICIENT_SHARES
        assert "need 15, have 10" in result.message


class TestErrorCodes:
    @pytest.mark.parametrize("error, code", [
        (InvalidQuantityError(0), ErrorCode.INVALID_QUANTITY),
        (InvalidPriceError('AAPL', -1.0), ErrorCode.INVALID_PRICE),
        (InsufficientFundsError(100.0, 50.0), ErrorCode.INSUFFICIENT_FUNDS),
        (InsufficientSharesError('AAPL', 2, 1), ErrorCode.INSUFFICIENT_SHARES),
        (SymbolNotFoundError('TSLA'), ErrorCode.SYMBOL_NOT_FOUND),
        (PriceUnavailableError(['TSLA']), ErrorCode.PRICE_UNAVAILABLE),
    ])
    def test_each_error_has_code(self, error, code):
        """Test every domain error is tagged with its code"""
        assert error.code == code


class TestValuation:
    def test_totals(self):
        """Test valuation totals include cash and holdings"""
        valuation = Valuation(
            lines=[ValuationLine('AAPL', 10, 150.0), ValuationLine('MSFT', 2, 300.0)],
            cash=1000.0,
        )

        assert valuation.holdings_value == 2100.0
        assert valuation.total_value == 3100.0
        assert valuation.is_complete

    def test_raise_for_unavailable(self):
        """Test unpriced holdings can be escalated to an error"""
        valuation = Valuation(lines=[], cash=1000.0, unavailable=['TSLA'])

        assert not valuation.is_complete
        with pytest.raises(PriceUnavailableError) as exc_info:
            valuation.raise_for_unavailable()
        assert exc_info.value.symbols == ['TSLA']

    def test_to_frame(self):
        """Test valuation lines convert to a table"""
        valuation = Valuation(lines=[ValuationLine('AAPL', 10, 150.0)], cash=0.0)
        frame = valuation.to_frame()

        assert list(frame.columns) == ['symbol', 'quantity', 'price', 'value']
        assert frame.iloc[0]['value'] == 1500.0
