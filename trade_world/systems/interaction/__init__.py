"""interaction systems."""

from .trading import TradeResult, TradingSystem

__all__ = ["TradeResult", "TradingSystem"]
