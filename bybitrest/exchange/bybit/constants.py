from enum import Enum
from typing import Final


API_VERSION: Final[str] = "v5"

# X-BAPI-SIGN-TYPE 2 selects HMAC-SHA256
SIGN_TYPE: Final[str] = "2"

RECV_WINDOW: Final[int] = 50000


class BybitBaseUrl(Enum):
    MAINNET = "https://api.bybit.com"
    TESTNET = "https://api-testnet.bybit.com"

    @classmethod
    def select(cls, testnet: bool) -> "BybitBaseUrl":
        return cls.TESTNET if testnet else cls.MAINNET


class BybitHttpMethod(Enum):
    GET = "GET"
    POST = "POST"


class BybitHeader(Enum):
    SIGN_TYPE = "X-BAPI-SIGN-TYPE"
    SIGN = "X-BAPI-SIGN"
    API_KEY = "X-BAPI-API-KEY"
    TIMESTAMP = "X-BAPI-TIMESTAMP"
    RECV_WINDOW = "X-BAPI-RECV-WINDOW"
    CONTENT_TYPE = "Content-Type"
