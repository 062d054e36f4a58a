# swap_planner/core/domain/entities/method_parameters.py

from dataclasses import dataclass
from typing import Dict

from hexbytes import HexBytes

from ....utils.serialization import to_json_safe


@dataclass(frozen=True)
class MethodParameters:
    """The only thing the planner produces: what to call and how much native to attach."""

    calldata: HexBytes
    value: int

    def to_dict(self) -> Dict[str, str]:
        return {
            "calldata": to_json_safe(self.calldata),
            "value": hex(self.value),
        }
