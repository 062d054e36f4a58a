import os
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from dotenv import load_dotenv
from web3 import Web3

from .core.domain.constants import ADDRESS_THIS, CONTRACT_BALANCE, MSG_SENDER, NATIVE_ADDRESS
from .core.domain.entities.currency import NativeCurrency, Token
from .core.domain.enums.trade_enums import CommandType

load_dotenv()

# Universal Router v1 command bytes
DEFAULT_COMMAND_CODES: Mapping[CommandType, int] = MappingProxyType({
    CommandType.V3_SWAP_EXACT_IN: 0x00,
    CommandType.V3_SWAP_EXACT_OUT: 0x01,
    CommandType.SWEEP: 0x04,
    CommandType.PAY_PORTION: 0x06,
    CommandType.V2_SWAP_EXACT_IN: 0x08,
    CommandType.V2_SWAP_EXACT_OUT: 0x09,
    CommandType.PERMIT2_PERMIT: 0x0A,
    CommandType.WRAP_ETH: 0x0B,
    CommandType.UNWRAP_WETH: 0x0C,
})

EXECUTE_SIGNATURE = "execute(bytes,bytes[])"
EXECUTE_WITH_DEADLINE_SIGNATURE = "execute(bytes,bytes[],uint256)"


@dataclass
class Settings:
    CHAIN_ID: int
    UNIVERSAL_ROUTER_ADDRESS: Optional[str]   # enables the permit spender check when set
    WRAPPED_NATIVE_ADDRESS: str               # ex.: WETH9 on mainnet

    NATIVE_SYMBOL: str = "ETH"

    # generic
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    def native_currency(self) -> NativeCurrency:
        weth = Token(self.CHAIN_ID, self.WRAPPED_NATIVE_ADDRESS, 18, f"W{self.NATIVE_SYMBOL}")
        return NativeCurrency(self.CHAIN_ID, weth, symbol=self.NATIVE_SYMBOL)


@dataclass(frozen=True)
class RouterConfig:
    """
    Everything the planner needs to know about the router deployment.
    Nothing here is read from a process global; pass a different instance
    to target another deployment.
    """

    router_address: Optional[str] = None
    command_codes: Mapping[CommandType, int] = field(default_factory=lambda: DEFAULT_COMMAND_CODES, hash=False)
    execute_signature: str = EXECUTE_SIGNATURE
    execute_with_deadline_signature: str = EXECUTE_WITH_DEADLINE_SIGNATURE

    msg_sender: str = MSG_SENDER
    address_this: str = ADDRESS_THIS
    native_address: str = NATIVE_ADDRESS
    contract_balance: int = CONTRACT_BALANCE

    def __post_init__(self):
        if self.router_address:
            object.__setattr__(self, "router_address", Web3.to_checksum_address(self.router_address))
        missing = [c.value for c in CommandType if c not in self.command_codes]
        if missing:
            raise ValueError(f"command_codes missing: {', '.join(missing)}")
        codes = list(self.command_codes.values())
        if len(set(codes)) != len(codes) or any(not 0 <= c <= 0x7F for c in codes):
            raise ValueError("command codes must be unique and fit in 7 bits")

    def code_for(self, command: CommandType) -> int:
        return self.command_codes[command]

    @classmethod
    def from_settings(cls, settings: Settings) -> "RouterConfig":
        return cls(router_address=settings.UNIVERSAL_ROUTER_ADDRESS or None)


@lru_cache()
def get_settings() -> Settings:
    return Settings(
        CHAIN_ID=int(os.environ.get("CHAIN_ID", 1)),
        UNIVERSAL_ROUTER_ADDRESS=os.environ.get("UNIVERSAL_ROUTER_ADDRESS") or None,
        WRAPPED_NATIVE_ADDRESS=os.environ.get("WRAPPED_NATIVE_ADDRESS", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
        NATIVE_SYMBOL=os.environ.get("NATIVE_SYMBOL", "ETH"),
        ENV=os.environ.get("ENV", "dev"),
        LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO"),
    )


def get_router_config() -> RouterConfig:
    return RouterConfig.from_settings(get_settings())
