"""Market catalog and price simulation."""

from .market import Market

__all__ = ['Market']
