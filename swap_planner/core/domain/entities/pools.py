# swap_planner/core/domain/entities/pools.py

from dataclasses import dataclass

from ..constants import U24_MAX
from ...exceptions import InvalidTradeError
from .currency import Token


@dataclass(frozen=True)
class PoolLeg:
    """
    One venue a route passes through. Only the two tokens matter for
    routing; concrete subclasses add what their encoder needs.
    """

    token0: Token
    token1: Token

    def __post_init__(self):
        if self.token0 == self.token1:
            raise InvalidTradeError(f"{type(self).__name__} needs two distinct tokens")
        if self.token0.chain_id != self.token1.chain_id:
            raise InvalidTradeError(f"{type(self).__name__} tokens live on different chains")

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    def involves_token(self, token: Token) -> bool:
        return token == self.token0 or token == self.token1

    def other_token(self, token: Token) -> Token:
        if token == self.token0:
            return self.token1
        if token == self.token1:
            return self.token0
        raise InvalidTradeError(f"{token} is not part of {self}")


@dataclass(frozen=True)
class V2Pair(PoolLeg):
    """Constant-product pair. The router finds it from the token path."""


@dataclass(frozen=True)
class V3Pool(PoolLeg):
    """Concentrated-liquidity pool, identified by its tokens and fee tier."""

    fee: int = 3000

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.fee, bool) or not isinstance(self.fee, int) or not 0 <= self.fee <= U24_MAX:
            raise InvalidTradeError("fee tier must fit in uint24")
