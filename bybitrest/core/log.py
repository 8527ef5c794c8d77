import spdlog as spd

from typing import Dict, Literal


LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SpdLog:
    """
    Registry of spdlog console loggers keyed by name.

    spdlog refuses to register two loggers under the same name, so every
    component asks for its logger here instead of building one directly.
    """

    _loggers: Dict[str, spd.ConsoleLogger] = {}

    LEVEL_MAP = {
        "TRACE": spd.LogLevel.TRACE,
        "DEBUG": spd.LogLevel.DEBUG,
        "INFO": spd.LogLevel.INFO,
        "WARNING": spd.LogLevel.WARN,
        "ERROR": spd.LogLevel.ERR,
        "CRITICAL": spd.LogLevel.CRITICAL,
    }

    @classmethod
    def get_logger(
        cls, name: str, level: LogLevel = "INFO", flush: bool = False
    ) -> spd.ConsoleLogger:
        if level not in cls.LEVEL_MAP:
            raise ValueError(f"Unknown log level: {level}")

        logger = cls._loggers.get(name)
        if logger is None:
            # name, multithreaded, stdout, colored
            logger = spd.ConsoleLogger(name, True, True, True)
            cls._loggers[name] = logger

        logger.set_level(cls.LEVEL_MAP[level])
        if flush:
            logger.flush_on(cls.LEVEL_MAP[level])
        return logger
