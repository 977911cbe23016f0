# handycmd/utils/enhanced_logging.py
from typing import Dict, Any

from loguru import logger as _root_logger


class EnhancedLogger:
    """Named logger with context tracking, emitting through loguru."""

    def __init__(self, name: str):
        self._name = name
        self._context: Dict[str, Any] = {}
        self._logger = _root_logger.bind(name=name)

    def with_context(self, **context) -> 'EnhancedLogger':
        """Create a new logger with added context."""
        new_logger = EnhancedLogger(self._name)
        new_logger._context = {**self._context, **context}
        new_logger._rebind()
        return new_logger

    def _rebind(self) -> None:
        self._logger = _root_logger.bind(name=self._name, **self._context)

    # depth=1 so loguru reports the caller, not this wrapper
    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.opt(depth=1).debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.opt(depth=1).info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.opt(depth=1).warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.opt(depth=1).error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        """Log an error together with the active exception's traceback."""
        self._logger.opt(depth=1, exception=True).error(msg, *args, **kwargs)

    def log(self, level: str, msg: str, *args, **kwargs) -> None:
        """Log a message with the specified level name."""
        self._logger.opt(depth=1).log(level, msg, *args, **kwargs)
