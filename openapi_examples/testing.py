"""
logging helpers for tests of applications which generate description documents
"""

from typing import Optional
import dataclasses
import datetime
import logging
import threading


@dataclasses.dataclass(frozen=True)
class LogMessage:
    timestamp: datetime.datetime
    category: str
    level: int
    message: str
    exception: Optional[BaseException] = None


class _CaptureHandler(logging.Handler):
    def __init__(self, category: str, name: str) -> None:
        super().__init__(logging.NOTSET)
        self.category = category
        self.logger_name = name
        self._messages: list[LogMessage] = []

    def emit(self, record: logging.LogRecord) -> None:
        # records propagated from the loggers of nested categories belong to those
        if record.name != self.logger_name:
            return
        exc = record.exc_info[1] if record.exc_info else None
        m = LogMessage(
            datetime.datetime.fromtimestamp(record.created, tz=datetime.timezone.utc),
            self.category,
            record.levelno,
            record.getMessage(),
            exc,
        )
        with self.lock:
            self._messages.append(m)

    def messages(self) -> list[LogMessage]:
        with self.lock:
            return list(self._messages)

    def clear(self) -> None:
        with self.lock:
            self._messages.clear()


class LoggerProvider:
    """
    Creates one logger per category.

    Capturing the messages of the created loggers is off by default and has to be
    enabled explicitly, without capture :meth:`get_all_log_messages` is always empty.
    """

    def __init__(self, output: Optional[logging.Logger] = None, capture: bool = False) -> None:
        """
        :param output: the created loggers are children of output, defaults to the root logger
        :param capture: collect the messages of the created loggers
        """
        self.output = output
        self.capture = capture
        self._lock = threading.Lock()
        self._loggers: dict[str, logging.Logger] = dict()
        self._handlers: dict[str, _CaptureHandler] = dict()
        self._levels: dict[str, int] = dict()

    @property
    def created_loggers(self) -> list[logging.Logger]:
        with self._lock:
            return list(self._loggers.values())

    def create_logger(self, category: str) -> logging.Logger:
        with self._lock:
            if (logger := self._loggers.get(category)) is not None:
                return logger
            if self.output is not None:
                logger = self.output.getChild(category)
            else:
                logger = logging.getLogger(category)
            if self.capture:
                handler = _CaptureHandler(category, logger.name)
                logger.addHandler(handler)
                self._levels[category] = logger.level
                if logger.getEffectiveLevel() > logging.DEBUG:
                    logger.setLevel(logging.DEBUG)
                self._handlers[category] = handler
            self._loggers[category] = logger
            return logger

    def get_all_log_messages(self) -> list[LogMessage]:
        if not self.capture:
            return []
        with self._lock:
            handlers = list(self._handlers.values())
        return sorted((m for h in handlers for m in h.messages()), key=lambda m: m.timestamp)

    def clear_all_log_messages(self) -> None:
        with self._lock:
            handlers = list(self._handlers.values())
        for h in handlers:
            h.clear()

    def close(self) -> None:
        with self._lock:
            for category, handler in self._handlers.items():
                logger = self._loggers[category]
                logger.removeHandler(handler)
                logger.setLevel(self._levels[category])
                handler.close()
            self._handlers.clear()
            self._levels.clear()
            self._loggers.clear()

    def __enter__(self) -> "LoggerProvider":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
