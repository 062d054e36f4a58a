import logging
from typing import List, Optional, Sequence

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector
from hexbytes import HexBytes

from ...adapters.abi import EXECUTE_ARGS, EXECUTE_WITH_DEADLINE_ARGS
from ...config import RouterConfig
from ..domain.entities.command import RouterCommand
from ..domain.entities.method_parameters import MethodParameters
from ..exceptions import InvalidTradeError


class MulticallComposer:
    """
    Puts every command in its final order and serializes the batched
    `execute` call around them.

    Order: permit, wrap, routes, unwrap, sweeps, refund.
    """

    def __init__(self, config: RouterConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    def compose(
        self,
        *,
        routes: Sequence[RouterCommand],
        value: int,
        permit: Sequence[RouterCommand] = (),
        wrap: Sequence[RouterCommand] = (),
        unwrap: Sequence[RouterCommand] = (),
        sweeps: Sequence[RouterCommand] = (),
        refund: Sequence[RouterCommand] = (),
        deadline: Optional[int] = None,
    ) -> MethodParameters:
        if not routes:
            raise InvalidTradeError("no route commands to execute")
        commands: List[RouterCommand] = [*permit, *wrap, *routes, *unwrap, *sweeps, *refund]
        return MethodParameters(calldata=self.encode_execute(commands, deadline), value=int(value))

    def encode_execute(self, commands: Sequence[RouterCommand], deadline: Optional[int] = None) -> HexBytes:
        command_bytes = bytes(self.config.code_for(c.command) for c in commands)
        inputs = [c.inputs for c in commands]

        if deadline is None:
            selector = function_signature_to_4byte_selector(self.config.execute_signature)
            args = encode(EXECUTE_ARGS, [command_bytes, inputs])
        else:
            selector = function_signature_to_4byte_selector(self.config.execute_with_deadline_signature)
            args = encode(EXECUTE_WITH_DEADLINE_ARGS, [command_bytes, inputs, deadline])

        self._logger.debug(
            "execute: commands=0x%s deadline=%s size=%d",
            command_bytes.hex(), deadline, len(selector) + len(args),
        )
        return HexBytes(selector + args)
