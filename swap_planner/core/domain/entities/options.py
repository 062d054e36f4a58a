# swap_planner/core/domain/entities/options.py

from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional

from hexbytes import HexBytes
from pydantic import BaseModel, ConfigDict, Field, field_validator
from web3 import Web3

from ..constants import MSG_SENDER, U48_MAX, U160_MAX, U256_MAX


def to_fraction(v: Any) -> Fraction:
    """
    Coerce a user supplied ratio into an exact Fraction.
    Floats are refused: 0.1 is not 1/10.
    """
    if isinstance(v, Fraction):
        return v
    if isinstance(v, (bool, float)):
        raise ValueError("ratios must be Fraction, int, Decimal, str or (numerator, denominator)")
    if isinstance(v, (int, Decimal, str)):
        return Fraction(v)
    if isinstance(v, (tuple, list)) and len(v) == 2:
        return Fraction(int(v[0]), int(v[1]))
    raise ValueError(f"cannot read {v!r} as a ratio")


class FeeOptions(BaseModel):
    """Portion of the output paid to an interface fee recipient."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fee: Fraction
    recipient: str

    @field_validator("fee", mode="before")
    @classmethod
    def exact_fee(cls, v: Any) -> Fraction:
        return to_fraction(v)

    @field_validator("recipient")
    @classmethod
    def checksum_recipient(cls, v: str) -> str:
        return Web3.to_checksum_address(v)


class PermitDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    amount: int = Field(..., ge=0, le=U160_MAX)
    expiration: int = Field(..., ge=0, le=U48_MAX)
    nonce: int = Field(..., ge=0, le=U48_MAX)

    @field_validator("token")
    @classmethod
    def checksum_token(cls, v: str) -> str:
        return Web3.to_checksum_address(v)


class Permit2Permit(BaseModel):
    """
    Signed Permit2 PermitSingle granting the router transfer rights.
    The signature is forwarded as-is; only the token contract judges it.
    """

    model_config = ConfigDict(frozen=True)

    details: PermitDetails
    spender: str
    sig_deadline: int = Field(..., ge=0, le=U256_MAX)
    signature: bytes

    @field_validator("spender")
    @classmethod
    def checksum_spender(cls, v: str) -> str:
        return Web3.to_checksum_address(v)

    @field_validator("signature", mode="before")
    @classmethod
    def hex_signature(cls, v: Any) -> bytes:
        if isinstance(v, str):
            return bytes(HexBytes(v))
        return v


class SwapOptions(BaseModel):
    """
    Execution options for one router call.

    slippage_tolerance is an exact ratio (e.g. Fraction(5, 100) or "0.005").
    Its range is checked when the call is planned, not here.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    slippage_tolerance: Fraction
    recipient: str = MSG_SENDER
    input_token_permit: Optional[Permit2Permit] = None
    deadline: Optional[int] = Field(default=None, ge=0, le=U256_MAX)
    fee: Optional[FeeOptions] = None

    @field_validator("slippage_tolerance", mode="before")
    @classmethod
    def exact_slippage(cls, v: Any) -> Fraction:
        return to_fraction(v)

    @field_validator("recipient")
    @classmethod
    def checksum_recipient(cls, v: str) -> str:
        return Web3.to_checksum_address(v)
