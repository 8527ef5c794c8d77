import os

from configparser import ConfigParser
from dataclasses import dataclass

from bybitrest.exchange.bybit.constants import RECV_WINDOW
from bybitrest.exchange.bybit.error import BybitConfigError


DEFAULT_CONFIG_PATH = os.path.join(".keys", "config.cfg")


@dataclass(frozen=True)
class BybitConfig:
    """
    Credentials and transport settings shared by every request of a client.

    ``secret`` only keys the request signature and is never sent.

    ```
    config = BybitConfig(api_key="KEY", secret="SECRET", testnet=True)
    client = BybitApiClient.from_config(config)
    ```
    """

    api_key: str
    secret: str
    testnet: bool = False
    recv_window: int = RECV_WINDOW
    timeout: int = 10

    def __post_init__(self):
        if not isinstance(self.api_key, str) or not self.api_key:
            raise BybitConfigError("api_key must be a non-empty string")
        if not isinstance(self.secret, str) or not self.secret:
            raise BybitConfigError("secret must be a non-empty string")
        if self.recv_window <= 0:
            raise BybitConfigError(
                f"recv_window must be positive, got {self.recv_window}"
            )
        if self.timeout <= 0:
            raise BybitConfigError(f"timeout must be positive, got {self.timeout}")

    def __repr__(self):
        return (
            f"BybitConfig(api_key={self.api_key!r}, secret='***', "
            f"testnet={self.testnet}, recv_window={self.recv_window}, "
            f"timeout={self.timeout})"
        )


def load_config(section: str, path: str = DEFAULT_CONFIG_PATH) -> BybitConfig:
    """
    Read one account from an INI file such as ``.keys/config.cfg``:

    ```
    [bybit_testnet]
    API_KEY = ...
    SECRET = ...
    TESTNET = true
    ```
    """
    if not os.path.exists(path):
        raise BybitConfigError(f"Config file not found: {path}")

    parser = ConfigParser()
    parser.read(path)

    if not parser.has_section(section):
        raise BybitConfigError(f"Section [{section}] not found in {path}")

    cfg = parser[section]
    try:
        return BybitConfig(
            api_key=cfg.get("API_KEY", ""),
            secret=cfg.get("SECRET", ""),
            testnet=cfg.getboolean("TESTNET", fallback=False),
            recv_window=cfg.getint("RECV_WINDOW", fallback=RECV_WINDOW),
            timeout=cfg.getint("TIMEOUT", fallback=10),
        )
    except ValueError as e:
        raise BybitConfigError(f"Invalid value in [{section}] of {path}: {e}") from e
