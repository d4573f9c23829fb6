"""Application and access logging setup.

Logging is configured once per process through :func:`init_logging`:

- ``crestastream_mock`` is the application logger every component logs to;
  its records go to ``app.log`` under ``LOG_DIR``.
- ``uvicorn.access`` receives one JSON line per HTTP request, written by the
  middleware installed on the FastAPI app, and goes to ``access.log``.

Both files rotate at midnight. Environment variables: LOG_DIR, LOG_LEVEL,
LOG_JSON, LOG_REQUEST_BODIES, LOG_RETENTION_DAYS, LOG_ROTATE_UTC.
"""

from __future__ import annotations

import json
import logging
import os
import time
from collections.abc import Iterable
from logging.handlers import TimedRotatingFileHandler
from uuid import uuid4

from fastapi import FastAPI, Request

APP_LOGGER_NAME = "crestastream_mock"
ACCESS_LOGGER_NAME = "uvicorn.access"

SENSITIVE_FIELDS = {
    "authorization",
    "cookie",
    "set-cookie",
    "password",
    "token",
    "refreshtoken",
    "refresh_token",
    "access_token",
}


class JsonFormatter(logging.Formatter):
    """Render records as a single JSON object per line (LOG_JSON=true)."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "level": record.levelname,
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "source": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)


def _get_formatter(log_json: bool) -> logging.Formatter:
    if log_json:
        return JsonFormatter()
    return logging.Formatter("[%(asctime)s] %(levelname)-6s [%(name)s] %(message)s")


def scrub(data: object) -> object:
    """Mask sensitive keys in nested dictionaries and lists."""

    if isinstance(data, dict):
        return {
            k: ("***" if str(k).lower() in SENSITIVE_FIELDS else scrub(v))
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [scrub(v) for v in data]
    return data


def _rotating_handler(
    path: str, formatter: logging.Formatter, retention_days: int, rotate_utc: bool
) -> TimedRotatingFileHandler:
    handler = TimedRotatingFileHandler(
        path, when="midnight", backupCount=retention_days, utc=rotate_utc
    )
    handler.setFormatter(formatter)
    return handler


def install_access_logging(app: FastAPI, skip_paths: Iterable[str] = ()) -> None:
    """Log one scrubbed JSON line per request and echo ``X-Request-Id``."""

    log_request_bodies = os.getenv("LOG_REQUEST_BODIES", "false").lower() == "true"
    skipped = set(skip_paths)
    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-Id") or uuid4().hex
        request.state.request_id = request_id

        if request.url.path in skipped:
            response = await call_next(request)
            response.headers["X-Request-Id"] = request_id
            return response

        start = time.perf_counter()

        body_content = None
        if log_request_bodies:
            body_bytes = await request.body()
            if body_bytes:
                try:
                    body_content = scrub(json.loads(body_bytes))
                except ValueError:
                    body_content = body_bytes.decode("utf-8", errors="replace")

        response = await call_next(request)

        client_ip = request.headers.get("X-Forwarded-For")
        if not client_ip and request.client is not None:
            client_ip = request.client.host

        log_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query": request.url.query or None,
            "status": response.status_code,
            "latency_ms": round((time.perf_counter() - start) * 1000, 2),
            "client_ip": client_ip,
            "headers": scrub(dict(request.headers)),
        }
        if body_content is not None:
            log_data["body"] = body_content

        response.headers["X-Request-Id"] = request_id
        access_logger.info(json.dumps(log_data, default=str, ensure_ascii=False))
        return response


def init_logging(app: FastAPI | None = None, skip_paths: Iterable[str] = ()) -> None:
    """Initialise application and access loggers."""

    log_dir = os.getenv("LOG_DIR", "logs")
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_json = os.getenv("LOG_JSON", "false").lower() == "true"
    retention_days = int(os.getenv("LOG_RETENTION_DAYS", "7"))
    rotate_utc = os.getenv("LOG_ROTATE_UTC", "false").lower() == "true"

    os.makedirs(log_dir, exist_ok=True)

    formatter = _get_formatter(log_json)
    log_level = getattr(logging, log_level_str, logging.INFO)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    if not app_logger.handlers:
        app_logger.addHandler(
            _rotating_handler(
                os.path.join(log_dir, "app.log"), formatter, retention_days, rotate_utc
            )
        )
    app_logger.setLevel(log_level)

    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    access_logger.handlers.clear()
    access_logger.addHandler(
        _rotating_handler(
            os.path.join(log_dir, "access.log"), formatter, retention_days, rotate_utc
        )
    )
    access_logger.setLevel(log_level)

    if app is not None:
        install_access_logging(app, skip_paths)
