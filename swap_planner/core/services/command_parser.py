from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from eth_abi import decode
from eth_utils import function_signature_to_4byte_selector
from hexbytes import HexBytes

from ...adapters.abi import COMMAND_ABI, EXECUTE_ARGS, EXECUTE_WITH_DEADLINE_ARGS
from ...config import RouterConfig
from ..domain.enums.trade_enums import CommandType
from ..exceptions import ValidationError


@dataclass(frozen=True)
class ParsedCommand:
    command: CommandType
    args: Tuple[Any, ...]


@dataclass(frozen=True)
class ParsedCall:
    commands: Tuple[ParsedCommand, ...]
    deadline: Optional[int] = None

    @property
    def command_types(self) -> Tuple[CommandType, ...]:
        return tuple(c.command for c in self.commands)


class CommandParser:
    """
    Reads `execute` calldata back into commands, for inspection before
    signing and for tests. Addresses come back lower-case, as eth_abi
    decodes them.
    """

    def __init__(self, config: RouterConfig):
        self.config = config
        self._by_code: Dict[int, CommandType] = {code: cmd for cmd, code in config.command_codes.items()}

    def parse(self, calldata) -> ParsedCall:
        data = bytes(HexBytes(calldata))
        selector, body = data[:4], data[4:]

        if selector == function_signature_to_4byte_selector(self.config.execute_signature):
            command_bytes, inputs = decode(EXECUTE_ARGS, body)
            deadline = None
        elif selector == function_signature_to_4byte_selector(self.config.execute_with_deadline_signature):
            command_bytes, inputs, deadline = decode(EXECUTE_WITH_DEADLINE_ARGS, body)
        else:
            raise ValidationError(f"unknown selector 0x{selector.hex()}")

        if len(command_bytes) != len(inputs):
            raise ValidationError("command and input counts differ")

        commands = []
        for code, raw in zip(command_bytes, inputs):
            # high bit is the router's allow-revert flag
            command = self._by_code.get(code & 0x7F)
            if command is None:
                raise ValidationError(f"unknown command 0x{code:02x}")
            commands.append(ParsedCommand(command, tuple(decode(COMMAND_ABI[command], raw))))
        return ParsedCall(commands=tuple(commands), deadline=deadline)
