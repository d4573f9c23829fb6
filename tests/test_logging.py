import json
import logging
from logging.handlers import TimedRotatingFileHandler

from fastapi.testclient import TestClient

from crestastream_mock.app_logging import (
    ACCESS_LOGGER_NAME,
    APP_LOGGER_NAME,
    init_logging,
    scrub,
)


def _clear_handlers(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.handlers.clear()
    return logger


def _flush(*loggers: logging.Logger) -> None:
    for logger in loggers:
        for handler in logger.handlers:
            handler.flush()


def test_timed_rotating_handler_configuration(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_RETENTION_DAYS", "5")
    app_logger = _clear_handlers(APP_LOGGER_NAME)
    access_logger = _clear_handlers(ACCESS_LOGGER_NAME)

    init_logging()

    for logger in (app_logger, access_logger):
        handler = next(
            h for h in logger.handlers if isinstance(h, TimedRotatingFileHandler)
        )
        assert handler.when == "MIDNIGHT"
        assert handler.backupCount == 5

    app_logger.handlers.clear()
    access_logger.handlers.clear()


def test_access_log_scrubs_tokens(tmp_path, app_factory):
    app_logger = _clear_handlers(APP_LOGGER_NAME)
    access_logger = _clear_handlers(ACCESS_LOGGER_NAME)
    app = app_factory(tmp_path, log_request_bodies=True)

    logging.getLogger("crestastream_mock.conversations.store").info("hello store")

    with TestClient(app) as client:
        resp = client.post(
            "/echo",
            json={"refreshToken": "secret", "password": "pw", "value": 1},
            headers={"Authorization": "Bearer secret"},
        )
        assert resp.status_code == 200
        assert resp.json()["refreshToken"] == "secret"
        assert resp.headers["X-Request-Id"]

    _flush(app_logger, access_logger)

    assert "hello store" in (tmp_path / "app.log").read_text()

    access_line = (tmp_path / "access.log").read_text().splitlines()[-1]
    data = json.loads(access_line[access_line.index("{") :])
    assert data["path"] == "/echo"
    assert data["status"] == 200
    assert data["headers"]["authorization"] == "***"
    assert data["body"] == {"refreshToken": "***", "password": "***", "value": 1}

    app_logger.handlers.clear()
    access_logger.handlers.clear()


def test_init_logging_replaces_existing_access_handlers(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    access_logger = _clear_handlers(ACCESS_LOGGER_NAME)
    access_logger.addHandler(logging.StreamHandler())

    init_logging()

    assert len(access_logger.handlers) == 1
    assert isinstance(access_logger.handlers[0], TimedRotatingFileHandler)
    access_logger.handlers.clear()


def test_scrub_nested():
    assert scrub({"user": {"Password": "x"}, "items": [{"token": "t"}]}) == {
        "user": {"Password": "***"},
        "items": [{"token": "***"}],
    }
