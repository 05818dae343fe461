import logging
import sys
from typing import TextIO

_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class KeyValueFormatter(logging.Formatter):
    """Renders structured extras after the message as sorted key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        }
        if not extras:
            return line
        pairs = " ".join(f"{key}={extras[key]}" for key in sorted(extras))
        return f"{line} | {pairs}"


class Log:
    """Centralized logging for the assessment app.

    Keyword arguments passed to the level methods are attached to the record
    and rendered by KeyValueFormatter, so call sites stay one-liners.
    """

    _logger: logging.Logger = logging.getLogger("shepredicts")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single handler (stdout unless given)."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
            handler.setFormatter(
                KeyValueFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
