import asyncio

from bybitrest import BybitApiClient, BybitMarketApi, load_config


async def main():
    config = load_config("bybit_testnet")
    async with BybitApiClient.from_config(config) as client:
        market = BybitMarketApi(client)

        res = await market.server_time()
        print(res.raise_for_ret_code().result)

        res = await market.tickers(category="linear", symbol="BTCUSDT")
        print(res.status, res.json())


if __name__ == "__main__":
    asyncio.run(main())
