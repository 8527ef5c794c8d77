import hmac
import hashlib
import aiohttp
import asyncio
import orjson

from typing import Any, Dict, Mapping
from urllib.parse import urlencode

from bybitrest.base import ApiClient
from bybitrest.exchange.bybit.config import BybitConfig
from bybitrest.exchange.bybit.constants import (
    RECV_WINDOW,
    SIGN_TYPE,
    BybitBaseUrl,
    BybitHeader,
    BybitHttpMethod,
)
from bybitrest.exchange.bybit.error import BybitSignatureError
from bybitrest.exchange.bybit.types import BybitHttpResponse


def canonical_params(payload: Mapping[str, Any] | None) -> Dict[str, str]:
    """Sort parameters by key, drop unset (None) values, render the rest as strings."""
    if not payload:
        return {}
    return {
        str(k): str(v) for k, v in sorted(payload.items()) if v is not None
    }


def generate_signature(
    secret: str | bytes,
    api_key: str,
    recv_window: int | str,
    params: Mapping[str, Any] | None,
    timestamp: int | str,
) -> str:
    """
    HMAC-SHA256 of ``timestamp + api_key + recv_window + k1=v1k2=v2...`` with
    keys in lexicographic order, hex encoded in lowercase.

    ```
    generate_signature("s", "k", 50000, {"b": "2", "a": "1"}, 1000)
    # signs "1000k50000a=1b=2"
    ```
    """
    if isinstance(secret, str):
        key = secret.encode("utf-8")
    elif isinstance(secret, (bytes, bytearray)):
        key = bytes(secret)
    else:
        raise BybitSignatureError(
            f"secret must be str or bytes, got {type(secret).__name__}"
        )
    if not key:
        raise BybitSignatureError("secret must not be empty")

    query = "".join(f"{k}={v}" for k, v in canonical_params(params).items())
    param = str(timestamp) + api_key + str(recv_window) + query
    return hmac.new(key, param.encode("utf-8"), hashlib.sha256).hexdigest()


class BybitApiClient(ApiClient):
    def __init__(
        self,
        api_key: str = None,
        secret: str = None,
        testnet: bool = False,
        timeout: int = 10,
        recv_window: int = RECV_WINDOW,
    ):
        self._config = BybitConfig(
            api_key=api_key,
            secret=secret,
            testnet=testnet,
            recv_window=recv_window,
            timeout=timeout,
        )
        super().__init__(timeout=self._config.timeout)

    @classmethod
    def from_config(cls, config: BybitConfig) -> "BybitApiClient":
        return cls(
            api_key=config.api_key,
            secret=config.secret,
            testnet=config.testnet,
            timeout=config.timeout,
            recv_window=config.recv_window,
        )

    @property
    def config(self) -> BybitConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return BybitBaseUrl.select(self._config.testnet).value

    @property
    def testnet(self) -> bool:
        return self._config.testnet

    def _generate_signature(self, params: Dict[str, str], timestamp: str) -> str:
        return generate_signature(
            self._config.secret,
            self._config.api_key,
            self._config.recv_window,
            params,
            timestamp,
        )

    def _get_headers(self, timestamp: str, signature: str) -> Dict[str, str]:
        return {
            BybitHeader.CONTENT_TYPE.value: "application/json",
            BybitHeader.SIGN_TYPE.value: SIGN_TYPE,
            BybitHeader.API_KEY.value: self._config.api_key,
            BybitHeader.RECV_WINDOW.value: str(self._config.recv_window),
            BybitHeader.TIMESTAMP.value: timestamp,
            BybitHeader.SIGN.value: signature,
        }

    async def request(
        self, method: str, endpoint: str, payload: Dict[str, Any] = None
    ) -> BybitHttpResponse:
        return await self._fetch(method, endpoint, payload)

    async def _fetch(
        self,
        method: str,
        endpoint: str,
        payload: Dict[str, Any] = None,
    ) -> BybitHttpResponse:
        if not isinstance(method, BybitHttpMethod):
            try:
                method = BybitHttpMethod(str(method).upper())
            except ValueError:
                raise ValueError(f"Unsupported method: {method}") from None

        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        params = canonical_params(payload)

        # one timestamp for both the signature and the header
        timestamp = str(self._clock.timestamp_ms())
        signature = self._generate_signature(params, timestamp)
        headers = self._get_headers(timestamp, signature)

        if method == BybitHttpMethod.GET:
            if params:
                url += f"?{urlencode(params)}"
            data = None
        else:
            data = orjson.dumps(params)

        await self._init_session()
        try:
            self._log.debug(f"Request: {method.value} {url}")
            response = await self._session.request(
                method=method.value,
                url=url,
                headers=headers,
                data=data,
            )
            raw = await response.read()
            self._log.debug(f"Response: {method.value} {url} {response.status}")
            return BybitHttpResponse(
                status=response.status,
                reason=response.reason,
                headers=dict(response.headers),
                data=raw,
            )
        except aiohttp.ClientError as e:
            self._log.error(f"Client Error {method.value} Url: {url} {e}")
            raise
        except asyncio.TimeoutError:
            self._log.error(f"Timeout {method.value} Url: {url}")
            raise
