from typing import List, Sequence

from hexbytes import HexBytes

from ..core.domain.entities.command import RouterCommand
from ..core.domain.entities.currency import Token
from ..core.domain.entities.plan import PlannedRoute
from ..core.domain.entities.pools import V3Pool
from ..core.domain.enums.trade_enums import CommandType, Protocol, TradeType
from .abi import encode_command
from .base import EncodeContext, ProtocolEncoder

FEE_BYTES = 3


def encode_v3_path(tokens: Sequence[Token], fees: Sequence[int], exact_output: bool = False) -> bytes:
    """
    Pack token(20) | fee(3) | token(20) | ...

    Exact-output swaps walk the path backwards, so it is packed from the
    output token to the input token.
    """
    if len(tokens) != len(fees) + 1:
        raise ValueError("a V3 path needs exactly one fee per hop")
    tokens = list(tokens)
    fees = list(fees)
    if exact_output:
        tokens.reverse()
        fees.reverse()
    packed = bytes(HexBytes(tokens[0].address))
    for fee, token in zip(fees, tokens[1:]):
        packed += int(fee).to_bytes(FEE_BYTES, "big") + bytes(HexBytes(token.address))
    return packed


class V3RouteEncoder(ProtocolEncoder):
    """
    A single-pool route encodes the direct pool path (two tokens and one fee
    tier); a multi-hop route packs every hop into one path. Either way the
    router gets one command.
    """

    protocol = Protocol.V3

    def encode_route(self, planned: PlannedRoute, ctx: EncodeContext) -> List[RouterCommand]:
        route = planned.route
        pools: List[V3Pool] = list(route.legs)
        fees = [p.fee for p in pools]
        if planned.trade_type == TradeType.EXACT_INPUT:
            path = encode_v3_path(route.path, fees)
            return [encode_command(
                CommandType.V3_SWAP_EXACT_IN,
                [ctx.recipient, planned.amount_in, planned.amount_out, path, ctx.payer_is_user],
            )]
        path = encode_v3_path(route.path, fees, exact_output=True)
        return [encode_command(
            CommandType.V3_SWAP_EXACT_OUT,
            [ctx.recipient, planned.amount_out, planned.amount_in, path, ctx.payer_is_user],
        )]
