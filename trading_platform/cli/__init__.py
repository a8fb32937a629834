"""Command line interface."""

from .menu import TradingMenu, main

__all__ = ['TradingMenu', 'main']
