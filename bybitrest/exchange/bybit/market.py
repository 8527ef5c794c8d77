from bybitrest.exchange.bybit.constants import API_VERSION
from bybitrest.exchange.bybit.rest_api import BybitApiClient
from bybitrest.exchange.bybit.types import BybitHttpResponse


class BybitMarketApi:
    """
    Market data routes of the v5 API. Keyword arguments are sent as query
    parameters unchanged, e.g. ``await market.tickers(category="linear",
    symbol="BTCUSDT")``.

    https://bybit-exchange.github.io/docs/v5/market/time
    """

    def __init__(self, client: BybitApiClient):
        self._client = client

    async def _get(self, route: str, **params) -> BybitHttpResponse:
        return await self._client.get(f"/{API_VERSION}/{route}", params)

    async def server_time(self) -> BybitHttpResponse:
        return await self._get("market/time")

    async def kline(self, **params) -> BybitHttpResponse:
        return await self._get("market/kline", **params)

    async def mark_price_kline(self, **params) -> BybitHttpResponse:
        return await self._get("market/mark-price-kline", **params)

    async def index_price_kline(self, **params) -> BybitHttpResponse:
        return await self._get("market/index-price-kline", **params)

    async def premium_index_kline(self, **params) -> BybitHttpResponse:
        return await self._get("market/premium-index-price-kline", **params)

    async def orderbook(self, **params) -> BybitHttpResponse:
        return await self._get("market/orderbook", **params)

    async def instruments_info(self, **params) -> BybitHttpResponse:
        return await self._get("market/instruments-info", **params)

    async def tickers(self, **params) -> BybitHttpResponse:
        return await self._get("market/tickers", **params)

    async def funding_history(self, **params) -> BybitHttpResponse:
        return await self._get("market/funding/history", **params)

    async def recent_trade(self, **params) -> BybitHttpResponse:
        return await self._get("market/recent-trade", **params)

    async def open_interest(self, **params) -> BybitHttpResponse:
        return await self._get("market/open-interest", **params)

    async def historical_volatility(self, **params) -> BybitHttpResponse:
        return await self._get("market/historical-volatility", **params)

    async def insurance(self, **params) -> BybitHttpResponse:
        return await self._get("market/insurance", **params)

    async def risk_limit(self, **params) -> BybitHttpResponse:
        return await self._get("market/risk-limit", **params)

    async def delivery_price(self, **params) -> BybitHttpResponse:
        return await self._get("market/delivery-price", **params)

    async def announcements(self, **params) -> BybitHttpResponse:
        return await self._get("announcements/index", **params)
