from typing import Any


class BybitError(Exception):
    def __init__(self, code: int | None, message: Any):
        self.code = code
        self.message = message
        super().__init__(message)

    def __str__(self):
        return f"Bybit error (code={self.code}): {self.message}"

    def __repr__(self):
        return self.__str__()


class BybitConfigError(BybitError):
    """Client setup is unusable: missing or malformed credentials or settings."""

    def __init__(self, message: str):
        super().__init__(code=None, message=message)


class BybitSignatureError(BybitConfigError):
    """The secret key cannot be used to key the HMAC."""
