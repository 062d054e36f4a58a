from .trade_enums import CommandType, Protocol, TradeType

__all__ = ["CommandType", "Protocol", "TradeType"]
