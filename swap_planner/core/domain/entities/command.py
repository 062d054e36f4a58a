# swap_planner/core/domain/entities/command.py

from dataclasses import dataclass

from ..enums.trade_enums import CommandType


@dataclass(frozen=True)
class RouterCommand:
    """One sub-call of the batched router call: a command and its ABI-encoded input."""

    command: CommandType
    inputs: bytes
