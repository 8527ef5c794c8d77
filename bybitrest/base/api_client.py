import ssl
import certifi
import orjson
import aiohttp

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from bybitrest.core.log import SpdLog
from bybitrest.core.nautilius_core import LiveClock


class ApiClient(ABC):
    def __init__(self, timeout: int = 10):
        self._timeout = timeout
        self._log = SpdLog.get_logger(type(self).__name__, level="DEBUG", flush=True)
        self._ssl_context = ssl.create_default_context(cafile=certifi.where())
        self._session: Optional[aiohttp.ClientSession] = None
        self._clock = LiveClock()

    async def _init_session(self):
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self._timeout)
            tcp_connector = aiohttp.TCPConnector(
                ssl=self._ssl_context, enable_cleanup_closed=True
            )
            self._session = aiohttp.ClientSession(
                connector=tcp_connector, json_serialize=orjson.dumps, timeout=timeout
            )

    async def close_session(self):
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self):
        await self._init_session()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close_session()

    async def get(self, endpoint: str, payload: Dict[str, Any] = None):
        return await self._fetch("GET", endpoint, payload)

    async def post(self, endpoint: str, payload: Dict[str, Any] = None):
        return await self._fetch("POST", endpoint, payload)

    @abstractmethod
    async def _fetch(
        self, method: str, endpoint: str, payload: Dict[str, Any] = None
    ) -> Any:
        raise NotImplementedError("Subclasses must implement this method.")
