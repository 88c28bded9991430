# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# The app's diary. Every line says which request and which gardener it belongs to, so we can
# follow one watering log or one disease check from start to finish.

# 🧪 Purpose (Technical Summary):
# Structured logging on top of the standard logging module. A context filter stamps request and
# user ids (contextvars) on every record; output is either JSON (python-json-logger) or plain text.
# StructuredLogger adds keyword-style extra fields, request/external-call timing and business events.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging, contextvars: record routing and per-request context

# 🔄 Connected Modules / Calls From:
# app.main (setup, startup/shutdown events), request logging middleware, plant care handlers,
# APIClient (external call timing), database connection manager

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'plant-care-api'
TEXT_FORMAT = '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
PASSTHROUGH_KWARGS = ('exc_info', 'stack_info', 'stacklevel')

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


class RequestContextFilter(logging.Filter):
    """Stamps service, host and request context onto every record."""

    def __init__(self):
        super().__init__()
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.timestamp = datetime.now(timezone.utc).isoformat()
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        record.request_id = request_id_var.get()
        record.user_id = user_id_var.get()
        return True


class PlantCareJsonFormatter(JsonFormatter):
    """One JSON object per record, with nested ``extra_fields`` lifted to ``extra``."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('json_ensure_ascii', False)
        super().__init__(*args, **kwargs)

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.update({
            'level': record.levelname,
            'logger': record.name,
            'function': record.funcName,
            'line': record.lineno,
        })
        for empty in ('request_id', 'user_id'):
            if not log_record.get(empty):
                log_record.pop(empty, None)

        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class PerformanceLogger:
    """Timing lines for inbound requests and outbound provider calls."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        user_id: Optional[str] = None,
        extra: Optional[Dict] = None
    ):
        fields = {
            'event_type': 'http_request',
            'method': method,
            'path': path,
            'status_code': status_code,
            'duration_ms': duration_ms,
            **(extra or {})
        }
        if user_id:
            fields['user_id'] = user_id
        self.logger.info(
            f"HTTP {method} {path} - {status_code} - {duration_ms:.2f}ms",
            extra={'extra_fields': fields}
        )

    def log_external_api_call(
        self,
        api_name: str,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: float,
        success: bool,
        extra: Optional[Dict] = None
    ):
        fields = {
            'event_type': 'external_api_call',
            'api_name': api_name,
            'endpoint': endpoint,
            'status_code': status_code,
            'duration_ms': duration_ms,
            'success': success,
            **(extra or {})
        }
        self.logger.log(
            logging.INFO if success else logging.WARNING,
            f"{api_name} {method} {endpoint} - {status_code} - {duration_ms:.2f}ms",
            extra={'extra_fields': fields}
        )


class StructuredLogger:
    """
    Thin wrapper over ``logging.Logger`` that accepts extra fields.

    ``logger.info("Plant created", extra={"plant_id": pid})`` and
    ``logger.info("Plant created", plant_id=pid)`` produce the same record.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.performance = PerformanceLogger(self.logger)

    def debug(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Optional[Dict] = None, **kwargs):
        if not self.logger.isEnabledFor(level):
            return
        log_kwargs = {key: kwargs.pop(key) for key in PASSTHROUGH_KWARGS if key in kwargs}
        fields = {**(extra or {}), **kwargs}
        if fields:
            log_kwargs['extra'] = {'extra_fields': fields}
        self.logger.log(level, message, **log_kwargs)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: Optional[str] = None,
        entity_type: Optional[str] = None,
        extra: Optional[Dict] = None
    ):
        """Domain milestones: plant added, care logged, diagnosis scored."""
        fields = {'event_type': 'business_event', 'business_event_type': event_type, **(extra or {})}
        if entity_id:
            fields['entity_id'] = entity_id
        if entity_type:
            fields['entity_type'] = entity_type
        self.info(description, extra=fields)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Configure the root logger from settings.

    Runs once per process; later calls return the startup logger untouched.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    numeric_level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)

    if (log_format or settings.LOG_FORMAT).lower() == 'json':
        formatter: logging.Formatter = PlantCareJsonFormatter(
            '%(timestamp)s %(message)s %(service)s %(hostname)s %(request_id)s %(user_id)s'
        )
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.addFilter(RequestContextFilter())
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    for noisy in ('aiohttp', 'asyncio', 'tenacity'):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.INFO if settings.DB_ECHO else logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """Cached StructuredLogger for ``name`` (usually ``__name__``)."""
    if name not in _loggers_cache:
        _loggers_cache[name] = StructuredLogger(name)
    return _loggers_cache[name]


@contextmanager
def log_context(request_id: Optional[str] = None, user_id: Optional[str] = None):
    """
    Bind a request id (generated when omitted) and user id to every log line
    written inside the block.
    """
    request_id = request_id or str(uuid4())
    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')
    try:
        yield {'request_id': request_id, 'user_id': user_id}
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)


def log_startup_event(service_name: str, version: str, extra: Optional[Dict] = None):
    get_logger('startup').info(
        f"Service {service_name} starting up",
        extra={'event_type': 'service_startup', 'version': version, **(extra or {})}
    )


def log_shutdown_event(service_name: str, extra: Optional[Dict] = None):
    get_logger('shutdown').info(
        f"Service {service_name} shutting down",
        extra={'event_type': 'service_shutdown', **(extra or {})}
    )
