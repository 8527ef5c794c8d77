from bybitrest.exchange.bybit import (
    BybitApiClient,
    BybitMarketApi,
    BybitAssetApi,
    BybitHttpResponse,
    BybitResponse,
    BybitError,
    BybitConfigError,
    BybitSignatureError,
    generate_signature,
)
from bybitrest.exchange.bybit.config import BybitConfig, load_config

__all__ = [
    "BybitApiClient",
    "BybitMarketApi",
    "BybitAssetApi",
    "BybitHttpResponse",
    "BybitResponse",
    "BybitError",
    "BybitConfigError",
    "BybitSignatureError",
    "BybitConfig",
    "generate_signature",
    "load_config",
]
