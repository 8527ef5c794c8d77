from setuptools import setup, find_packages


setup(
    name="bybitrest",
    version="0.1.0",
    description="Signed asyncio client for the Bybit v5 REST API",
    packages=find_packages(include=["bybitrest", "bybitrest.*"]),
    python_requires=">=3.11",
    install_requires=[
        "aiohttp",
        "certifi",
        "msgspec",
        "orjson",
        "nautilus_trader",
        "spdlog",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)
