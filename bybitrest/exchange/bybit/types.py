import msgspec
import orjson

from typing import Any, Dict, Type, TypeVar

from bybitrest.exchange.bybit.error import BybitError


T = TypeVar("T")


class BybitResponse(msgspec.Struct, frozen=True):
    retCode: int
    retMsg: str
    result: Dict[str, Any]
    time: int
    retExtInfo: Dict[str, Any] | None = None


class BybitHttpResponse(msgspec.Struct, frozen=True):
    """
    Raw reply from the exchange. The status code is not interpreted by the
    client; call ``raise_for_ret_code`` to opt into error checking.
    """

    status: int
    reason: str | None
    headers: Dict[str, str]
    data: bytes

    @property
    def ok(self) -> bool:
        return self.status < 400

    def json(self) -> Any:
        return orjson.loads(self.data)

    def decode(self, type_: Type[T]) -> T:
        return msgspec.json.decode(self.data, type=type_)

    def envelope(self) -> BybitResponse:
        return self.decode(BybitResponse)

    def raise_for_ret_code(self) -> BybitResponse:
        if not self.ok:
            raise BybitError(code=self.status, message=self._error_message())
        try:
            response = self.envelope()
        except msgspec.DecodeError:
            raise BybitError(code=self.status, message=self._error_message()) from None
        if response.retCode != 0:
            raise BybitError(code=response.retCode, message=response.retMsg)
        return response

    def _error_message(self) -> Any:
        if not self.data:
            return self.reason
        try:
            return orjson.loads(self.data)
        except orjson.JSONDecodeError:
            # gateway errors come back as html or plain text
            return self.data.decode("utf-8", errors="replace")
