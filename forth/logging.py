from datetime import datetime, timezone
import inspect
import json
import logging
import pathlib
import traceback
from typing import Callable, Dict, Optional, Tuple


# QUESTION: Use a LoggingAdapter instead?
class ForthLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            caller = inspect.stack(0)[1]
            _log(self._logger.debug, format_string, caller, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.INFO):
            caller = inspect.stack(0)[1]
            _log(self._logger.info, format_string, caller, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.WARNING):
            caller = inspect.stack(0)[1]
            _log(self._logger.warning, format_string, caller, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        if self._logger.isEnabledFor(logging.ERROR):
            caller = inspect.stack(0)[1]
            _log(self._logger.error, format_string, caller, args, kwargs)


def get_logger(name: str) -> ForthLogger:
    return ForthLogger(logging.getLogger(name))


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            file_name, module, line_number, function_name = _origin(obj)
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                'level_name': obj.levelname,
                'path_name': file_name,
                'file_name': pathlib.Path(file_name).name,
                'module': module,
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': line_number,
                'function_name': function_name,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
                'thread': obj.thread,
                'thread_name': obj.threadName,
                'process_name': obj.processName,
                'process': obj.process,
            }
        return super().default(obj)


def _origin(record: logging.LogRecord) -> Tuple[str, str, int, str]:
    # Records from ForthLogger point at the wrapper, so prefer the frame it
    # captured.
    caller: Optional[inspect.FrameInfo] = getattr(record, 'caller', None)
    if caller is None:
        return (
            record.pathname,
            record.module,
            record.lineno,
            record.funcName,
        )
    return (
        caller.filename,
        caller.frame.f_globals['__name__'],
        caller.lineno,
        caller.function,
    )


class JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: Tuple[object, ...],
    kwargs: Dict[str, object],
) -> None:
    exc_info = kwargs.pop('exc_info', None)
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self,
        format_string: str,
        args: Tuple[object, ...],
        kwargs: Dict[str, object],
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
