from bybitrest.exchange.bybit.constants import BybitBaseUrl, BybitHttpMethod
from bybitrest.exchange.bybit.error import (
    BybitError,
    BybitConfigError,
    BybitSignatureError,
)
from bybitrest.exchange.bybit.types import BybitResponse, BybitHttpResponse
from bybitrest.exchange.bybit.rest_api import BybitApiClient, generate_signature
from bybitrest.exchange.bybit.market import BybitMarketApi
from bybitrest.exchange.bybit.asset import BybitAssetApi

__all__ = [
    "BybitBaseUrl",
    "BybitHttpMethod",
    "BybitError",
    "BybitConfigError",
    "BybitSignatureError",
    "BybitResponse",
    "BybitHttpResponse",
    "BybitApiClient",
    "generate_signature",
    "BybitMarketApi",
    "BybitAssetApi",
]
