from bybitrest.exchange.bybit.constants import API_VERSION
from bybitrest.exchange.bybit.rest_api import BybitApiClient
from bybitrest.exchange.bybit.types import BybitHttpResponse


class BybitAssetApi:
    """
    Asset routes of the v5 API: balances, transfers and deposits. Query
    routes send keyword arguments as query parameters, transfer and deposit
    account changes send them as a JSON body.

    https://bybit-exchange.github.io/docs/v5/asset/balance/all-balance
    """

    def __init__(self, client: BybitApiClient):
        self._client = client

    async def _get(self, route: str, **params) -> BybitHttpResponse:
        return await self._client.get(f"/{API_VERSION}/asset/{route}", params)

    async def _post(self, route: str, **params) -> BybitHttpResponse:
        return await self._client.post(f"/{API_VERSION}/asset/{route}", params)

    async def coin_exchange_records(self, **params) -> BybitHttpResponse:
        return await self._get("exchange/order-record", **params)

    async def delivery_records(self, **params) -> BybitHttpResponse:
        return await self._get("delivery-record", **params)

    async def settlement_records(self, **params) -> BybitHttpResponse:
        return await self._get("settlement-record", **params)

    async def asset_info(self, **params) -> BybitHttpResponse:
        return await self._get("transfer/query-asset-info", **params)

    async def all_coins_balance(self, **params) -> BybitHttpResponse:
        return await self._get("transfer/query-account-coins-balance", **params)

    async def single_coin_balance(self, **params) -> BybitHttpResponse:
        return await self._get("transfer/query-account-coin-balance", **params)

    async def transferable_coins(self, **params) -> BybitHttpResponse:
        return await self._get("transfer/query-transfer-coin-list", **params)

    async def create_internal_transfer(self, **params) -> BybitHttpResponse:
        return await self._post("transfer/inter-transfer", **params)

    async def internal_transfer_records(self, **params) -> BybitHttpResponse:
        return await self._get("transfer/query-inter-transfer-list", **params)

    async def sub_uids(self) -> BybitHttpResponse:
        return await self._get("transfer/query-sub-member-list")

    async def create_universal_transfer(self, **params) -> BybitHttpResponse:
        return await self._post("transfer/universal-transfer", **params)

    async def universal_transfer_records(self, **params) -> BybitHttpResponse:
        return await self._get("transfer/query-universal-transfer-list", **params)

    async def allowed_deposit_coin_info(self, **params) -> BybitHttpResponse:
        return await self._get("deposit/query-allowed-list", **params)

    async def set_deposit_account(self, **params) -> BybitHttpResponse:
        return await self._post("deposit/deposit-to-account", **params)

    async def deposit_records(self, **params) -> BybitHttpResponse:
        return await self._get("deposit/query-record", **params)

    async def sub_deposit_records(self, **params) -> BybitHttpResponse:
        return await self._get("deposit/query-sub-member-record", **params)

    async def internal_deposit_records(self, **params) -> BybitHttpResponse:
        return await self._get("deposit/query-internal-record", **params)

    async def master_deposit_address(self, **params) -> BybitHttpResponse:
        return await self._get("deposit/query-address", **params)
