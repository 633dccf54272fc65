"""Logging setup for dbscope.

Every module logs through ``logger`` (or a child obtained with
``logger.with_context(...)``).  Context dimensions travel as ``extra``
fields so the JSON formatter emits them as top-level keys.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

from pythonjsonlogger.json import JsonFormatter

_LOGGER_NAME = "dbscope"
_HANDLER_NAME = "dbscope-stdout"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries a set of dimensions on every record."""

    def __init__(self, logger: logging.Logger, dimensions: Optional[dict[str, Any]] = None):
        super().__init__(logger, {})
        self.dimensions: dict[str, Any] = dict(dimensions or {})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.dimensions, **kwargs.get("extra", {})}
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a child logger with additional dimensions."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions})


class _LocalFormatter(logging.Formatter):
    """Plain text formatter that appends context dimensions."""

    _RESERVED = set(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {k: v for k, v in record.__dict__.items() if k not in self._RESERVED}
        if not extras:
            return base
        rendered = " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        return f"{base} [{rendered}]"


def configure_logging(level: str = "INFO", *, local: bool = False) -> None:
    """Install a single stdout handler on the root logger.

    Calling this more than once replaces the handler instead of stacking
    a second one.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if local:
        handler.setFormatter(
            _LocalFormatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(
            JsonFormatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"levelname": "level", "asctime": "timestamp"},
            )
        )
    root.addHandler(handler)


logger = ContextualLogger(logging.getLogger(_LOGGER_NAME))
