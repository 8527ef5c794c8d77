import pytest

from bybitrest.exchange.bybit import BybitApiClient


class FixedClock:
    def __init__(self, timestamp_ms: int = 1000):
        self.timestamp_ms_value = timestamp_ms
        self.calls = 0

    def timestamp_ms(self) -> int:
        self.calls += 1
        return self.timestamp_ms_value


class MockResponse:
    def __init__(self, status=200, reason="OK", body=b"{}", headers=None):
        self.status = status
        self.reason = reason
        self.headers = headers or {"Content-Type": "application/json"}
        self._body = body

    async def read(self):
        return self._body


class MockSession:
    """Stands in for aiohttp.ClientSession and records every request."""

    def __init__(self, response: MockResponse | None = None, error=None):
        self.response = response or MockResponse()
        self.error = error
        self.requests = []
        self.closed = False

    async def request(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self):
        self.closed = True


@pytest.fixture
def clock():
    return FixedClock(1000)


@pytest.fixture
def session():
    return MockSession(
        MockResponse(
            body=b'{"retCode":0,"retMsg":"OK","result":{},"retExtInfo":{},"time":1000}'
        )
    )


def make_client(clock, session, testnet=False) -> BybitApiClient:
    client = BybitApiClient(api_key="k", secret="s", testnet=testnet)
    client._clock = clock
    client._session = session
    return client


@pytest.fixture
def client(clock, session):
    return make_client(clock, session)


@pytest.fixture
def testnet_client(clock, session):
    return make_client(clock, session, testnet=True)
