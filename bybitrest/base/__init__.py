from bybitrest.base.api_client import ApiClient


__all__ = [
    "ApiClient",
]
