from nautilus_trader.common.component import LiveClock  # noqa


__all__ = ["LiveClock"]
