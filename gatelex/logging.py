from datetime import datetime, timezone
import inspect
import json
import logging
import pathlib
import sys
import traceback
from typing import Callable, Dict, List, Optional, TextIO


class GatelexLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        # Looking up the caller is slow, so skip it for disabled levels.
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        caller = inspect.stack()[1]
        _log(self._logger.debug, format_string, caller, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if not self._logger.isEnabledFor(logging.INFO):
            return
        caller = inspect.stack()[1]
        _log(self._logger.info, format_string, caller, args, kwargs)


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            caller: Optional[inspect.FrameInfo] = getattr(obj, 'caller', None)
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                # arguments for the formatting string don't need to be in the JSON
                'level_name': obj.levelname,
                'path_name': caller.filename if caller else obj.pathname,
                'file_name': pathlib.Path(
                    caller.filename if caller else obj.pathname
                ).name,
                'module': (
                    caller.frame.f_globals['__name__']
                    if caller
                    else obj.module
                ),
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': caller.lineno if caller else obj.lineno,
                'function_name': caller.function if caller else obj.funcName,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
                'thread': obj.thread,
                'thread_name': obj.threadName,
                'process_name': obj.processName,
                'process': obj.process,
            }
        return super().default(obj)


class _JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


def configure(
    verbose: bool, json_logs: bool, stream: Optional[TextIO] = None
) -> logging.Handler:
    """Send gatelex logs to stream (stderr by default).

    Only warnings and errors are shown unless verbose is set."""
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    if json_logs:
        handler.setFormatter(_JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter('%(levelname)s:%(name)s: %(message)s')
        )
    logger = logging.getLogger('gatelex')
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
