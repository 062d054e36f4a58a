# swap_planner/core/domain/entities/route.py

from dataclasses import dataclass
from typing import ClassVar, Tuple, Type, Union

from ...exceptions import InvalidTradeError
from ..enums.trade_enums import Protocol
from .currency import Currency, Token
from .pools import PoolLeg, V2Pair, V3Pool


@dataclass(frozen=True)
class _Route:
    """
    Ordered legs from input_currency to output_currency.

    Construction checks that the legs form a connected path between the
    wrapped input and output tokens; `path` is that token sequence.
    """

    legs: Tuple[PoolLeg, ...]
    input_currency: Currency
    output_currency: Currency

    protocol: ClassVar[Protocol]
    leg_type: ClassVar[Type[PoolLeg]] = PoolLeg

    def __post_init__(self):
        object.__setattr__(self, "legs", tuple(self.legs))
        if not self.legs:
            raise InvalidTradeError(f"{type(self).__name__} must contain at least one leg")
        for leg in self.legs:
            if not isinstance(leg, self.leg_type):
                raise InvalidTradeError(
                    f"{type(self).__name__} only accepts {self.leg_type.__name__} legs, got {type(leg).__name__}"
                )
        chain_id = self.legs[0].chain_id
        if any(leg.chain_id != chain_id for leg in self.legs):
            raise InvalidTradeError("all legs must be on the same chain")
        if self.input_currency.chain_id != chain_id or self.output_currency.chain_id != chain_id:
            raise InvalidTradeError("route currencies must be on the legs' chain")

        path = [self.input_currency.wrapped]
        for leg in self.legs:
            current = path[-1]
            if not leg.involves_token(current):
                raise InvalidTradeError(f"leg {len(path)} does not start at {current}")
            path.append(leg.other_token(current))
        if path[-1] != self.output_currency.wrapped:
            raise InvalidTradeError(f"route ends at {path[-1]}, expected {self.output_currency.wrapped}")
        object.__setattr__(self, "_path", tuple(path))

    @property
    def path(self) -> Tuple[Token, ...]:
        return self._path

    @property
    def chain_id(self) -> int:
        return self.legs[0].chain_id


@dataclass(frozen=True)
class V2Route(_Route):
    protocol: ClassVar[Protocol] = Protocol.V2
    leg_type: ClassVar[Type[PoolLeg]] = V2Pair


@dataclass(frozen=True)
class V3Route(_Route):
    protocol: ClassVar[Protocol] = Protocol.V3
    leg_type: ClassVar[Type[PoolLeg]] = V3Pool


@dataclass(frozen=True)
class MixedRoute(_Route):
    """Legs may alternate between pair and pool generations."""

    protocol: ClassVar[Protocol] = Protocol.MIXED


Route = Union[V2Route, V3Route, MixedRoute]
