from dataclasses import fields, is_dataclass
from enum import Enum
from fractions import Fraction
from typing import Any

from hexbytes import HexBytes
from web3 import Web3


def to_json_safe(obj: Any) -> Any:
    """
    Turn planner output into JSON primitives: MethodParameters calldata,
    parsed commands, planned routes.

    - HexBytes / bytes -> "0x..." str
    - Enum             -> its value (checked before str, TradeType is a str)
    - Fraction         -> "num/den" str
    - dataclass        -> {field: value}
    - dict / list / tuple -> recursed
    - anything else    -> str(obj)
    """
    if isinstance(obj, HexBytes):
        return Web3.to_hex(obj)
    if isinstance(obj, (bytes, bytearray)):
        return "0x" + bytes(obj).hex()

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj

    if isinstance(obj, Fraction):
        return f"{obj.numerator}/{obj.denominator}"

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_json_safe(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(to_json_safe(k)): to_json_safe(v) for (k, v) in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [to_json_safe(v) for v in obj]

    return str(obj)
