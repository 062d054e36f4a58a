# swap_planner/core/domain/entities/currency.py

from dataclasses import dataclass, field
from typing import Optional, Union

from web3 import Web3

from ..constants import NATIVE_ADDRESS, U256_MAX


@dataclass(frozen=True)
class Token:
    """
    Fungible token identified by (chain_id, address).
    decimals/symbol/name are informational and ignored by equality.
    """

    chain_id: int
    address: str
    decimals: int = field(default=18, compare=False)
    symbol: Optional[str] = field(default=None, compare=False)
    name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "address", Web3.to_checksum_address(self.address))
        if not 0 <= int(self.decimals) < 256:
            raise ValueError("decimals must fit in uint8")

    @property
    def is_native(self) -> bool:
        return False

    @property
    def wrapped(self) -> "Token":
        return self

    def __str__(self) -> str:
        return self.symbol or self.address


@dataclass(frozen=True)
class NativeCurrency:
    """
    The chain's native asset. Venues only hold its wrapped token, so every
    route touching it goes through `wrapped`.
    """

    chain_id: int
    wrapped: Token = field(compare=False)
    decimals: int = field(default=18, compare=False)
    symbol: str = field(default="ETH", compare=False)
    name: str = field(default="Ether", compare=False)

    def __post_init__(self):
        if self.wrapped.chain_id != self.chain_id:
            raise ValueError("wrapped token lives on a different chain")

    @property
    def is_native(self) -> bool:
        return True

    @property
    def address(self) -> str:
        return NATIVE_ADDRESS

    def __str__(self) -> str:
        return self.symbol


Currency = Union[Token, NativeCurrency]


@dataclass(frozen=True)
class CurrencyAmount:
    """Raw (smallest-unit) integer amount of a currency. Never a float."""

    currency: Currency
    raw: int

    def __post_init__(self):
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise TypeError("raw amount must be an int")
        if self.raw < 0 or self.raw > U256_MAX:
            raise ValueError("raw amount must be within uint256")

    @classmethod
    def from_raw_amount(cls, currency: Currency, raw: Union[int, str]) -> "CurrencyAmount":
        return cls(currency, int(raw))

    def __add__(self, other: "CurrencyAmount") -> "CurrencyAmount":
        if other.currency != self.currency:
            raise ValueError("cannot add amounts of different currencies")
        return CurrencyAmount(self.currency, self.raw + other.raw)

    def __str__(self) -> str:
        return f"{self.raw} {self.currency}"
