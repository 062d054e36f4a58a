from .base import EncodeContext, ProtocolEncoder
from .mixed import MixedRouteEncoder
from .registry import encoder_for
from .uniswap_v2 import V2RouteEncoder
from .uniswap_v3 import V3RouteEncoder

__all__ = [
    "EncodeContext",
    "MixedRouteEncoder",
    "ProtocolEncoder",
    "V2RouteEncoder",
    "V3RouteEncoder",
    "encoder_for",
]
