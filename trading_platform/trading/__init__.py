"""Trading session orchestration."""

from .session import TradingSession

__all__ = ['TradingSession']
