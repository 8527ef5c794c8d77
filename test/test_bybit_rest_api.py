import asyncio
import aiohttp
import orjson
import pytest

from urllib.parse import urlsplit, parse_qs

from bybitrest.exchange.bybit import (
    BybitApiClient,
    BybitBaseUrl,
    BybitConfigError,
    BybitHttpResponse,
)
from bybitrest.exchange.bybit.config import BybitConfig


GET_SIGNATURE = "667702ea96012da00916b59bd72eb2feae07549bd2eb99ced7fe5d42dd90abfd"
POST_SIGNATURE = "af07ac0f3bcd8769bfc3ae1998a7e8de58b652c341a1d032716c5fefea64bd3b"


@pytest.mark.asyncio
async def test_get_puts_params_in_query(client, session):
    await client.get("v5/market/tickers", {"x": "1"})

    sent = session.requests[0]
    url = urlsplit(sent["url"])
    assert sent["method"] == "GET"
    assert f"{url.scheme}://{url.netloc}" == BybitBaseUrl.MAINNET.value
    assert url.path == "/v5/market/tickers"
    assert parse_qs(url.query) == {"x": ["1"]}
    assert sent["data"] is None


@pytest.mark.asyncio
async def test_get_without_params_has_no_query(client, session):
    await client.get("/v5/market/time")

    assert session.requests[0]["url"] == "https://api.bybit.com/v5/market/time"


@pytest.mark.asyncio
async def test_post_sends_json_body(client, session):
    await client.post("/v5/order/create", {"side": "Buy"})

    sent = session.requests[0]
    assert sent["method"] == "POST"
    assert sent["url"] == "https://api.bybit.com/v5/order/create"
    assert orjson.loads(sent["data"]) == {"side": "Buy"}
    assert sent["data"] == b'{"side":"Buy"}'


@pytest.mark.asyncio
async def test_post_without_params_sends_empty_object(client, session):
    await client.post("/v5/order/cancel-all")

    assert session.requests[0]["data"] == b"{}"


@pytest.mark.asyncio
async def test_headers(client, session):
    await client.get("v5/market/tickers", {"x": "1"})

    headers = session.requests[0]["headers"]
    assert headers == {
        "X-BAPI-SIGN-TYPE": "2",
        "X-BAPI-SIGN": GET_SIGNATURE,
        "X-BAPI-API-KEY": "k",
        "X-BAPI-TIMESTAMP": "1000",
        "X-BAPI-RECV-WINDOW": "50000",
        "Content-Type": "application/json",
    }


@pytest.mark.asyncio
async def test_post_signature_uses_body_params(client, session):
    await client.post("/v5/order/create", {"side": "Buy"})

    assert session.requests[0]["headers"]["X-BAPI-SIGN"] == POST_SIGNATURE


@pytest.mark.asyncio
async def test_timestamp_captured_once_per_request(client, session, clock):
    clock.timestamp_ms_value = 1700000000123
    await client.request("GET", "v5/market/time")

    assert clock.calls == 1
    assert session.requests[0]["headers"]["X-BAPI-TIMESTAMP"] == "1700000000123"


@pytest.mark.asyncio
async def test_method_is_case_insensitive(client, session):
    await client.request("post", "/v5/order/create", {"side": "Sell"})

    assert session.requests[0]["method"] == "POST"


@pytest.mark.asyncio
async def test_unsupported_method(client, session):
    with pytest.raises(ValueError):
        await client.request("DELETE", "/v5/order/create")
    assert session.requests == []


@pytest.mark.asyncio
async def test_testnet_only_changes_base_url(client, testnet_client, session):
    await client.get("v5/market/tickers", {"x": "1"})
    await testnet_client.get("v5/market/tickers", {"x": "1"})

    mainnet, testnet = session.requests
    assert mainnet["url"] == "https://api.bybit.com/v5/market/tickers?x=1"
    assert testnet["url"] == "https://api-testnet.bybit.com/v5/market/tickers?x=1"
    assert mainnet["headers"] == testnet["headers"]
    assert mainnet["data"] == testnet["data"]
    assert client.base_url == BybitBaseUrl.MAINNET.value
    assert testnet_client.base_url == BybitBaseUrl.TESTNET.value


@pytest.mark.asyncio
async def test_returns_raw_response(client, session):
    response = await client.get("v5/market/time")

    assert isinstance(response, BybitHttpResponse)
    assert response.status == 200
    assert response.reason == "OK"
    assert response.envelope().retCode == 0


@pytest.mark.asyncio
async def test_http_errors_pass_through(client, session):
    session.response.status = 403
    session.response.reason = "Forbidden"
    session.response._body = b"forbidden"

    response = await client.get("v5/market/time")

    assert response.status == 403
    assert response.data == b"forbidden"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()],
)
async def test_transport_errors_surface_unchanged(client, session, error):
    session.error = error

    with pytest.raises(type(error)) as exc_info:
        await client.get("v5/market/time")
    assert exc_info.value is error
    assert len(session.requests) == 1


@pytest.mark.asyncio
async def test_context_manager_closes_session(client, session):
    async with client as c:
        assert c is client
    assert session.closed
    assert client._session is None

    await client.close_session()


def test_from_config():
    config = BybitConfig(api_key="k", secret="s", testnet=True, recv_window=5000)
    client = BybitApiClient.from_config(config)

    assert client.config == config
    assert client.testnet
    assert client.base_url == "https://api-testnet.bybit.com"


@pytest.mark.parametrize("api_key, secret", [(None, "s"), ("k", None), ("", "s"), ("k", "")])
def test_missing_credentials(api_key, secret):
    with pytest.raises(BybitConfigError):
        BybitApiClient(api_key=api_key, secret=secret)


@pytest.mark.asyncio
async def test_headers_follow_config(clock, session):
    config = BybitConfig(api_key="key2", secret="s", testnet=True, recv_window=5000)
    client = BybitApiClient.from_config(config)
    client._clock = clock
    client._session = session

    await client.get("v5/market/time")

    sent = session.requests[0]
    assert sent["url"] == "https://api-testnet.bybit.com/v5/market/time"
    assert sent["headers"]["X-BAPI-API-KEY"] == "key2"
    assert sent["headers"]["X-BAPI-RECV-WINDOW"] == "5000"
    assert not hasattr(client, "_headers")
