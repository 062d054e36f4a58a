from typing import Dict, Type

from ..config import RouterConfig
from ..core.domain.enums.trade_enums import Protocol
from ..core.exceptions import UnsupportedProtocolError
from .base import ProtocolEncoder
from .mixed import MixedRouteEncoder
from .uniswap_v2 import V2RouteEncoder
from .uniswap_v3 import V3RouteEncoder

ENCODERS: Dict[Protocol, Type[ProtocolEncoder]] = {
    Protocol.V2: V2RouteEncoder,
    Protocol.V3: V3RouteEncoder,
    Protocol.MIXED: MixedRouteEncoder,
}


def encoder_for(protocol: Protocol, config: RouterConfig) -> ProtocolEncoder:
    try:
        return ENCODERS[protocol](config)
    except KeyError:
        raise UnsupportedProtocolError(f"no encoder registered for {protocol!r}") from None
