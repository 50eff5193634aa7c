"""
Инициализация расширений Flask.

Объект SQLAlchemy создаётся здесь без привязки к приложению,
чтобы модели и сервисы могли импортировать его без циклических
импортов. Привязка выполняется в create_app().
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def init_logging(app: Flask) -> None:
    """Настроить логирование по LOG_LEVEL / LOG_FILE из конфига."""
    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO

    formatter = logging.Formatter(_LOG_FORMAT)
    app.logger.setLevel(level)
    for handler in app.logger.handlers:
        handler.setFormatter(formatter)

    log_file = app.config.get("LOG_FILE")
    if log_file and not any(isinstance(h, RotatingFileHandler) for h in app.logger.handlers):
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=int(app.config.get("LOG_FILE_MAX_BYTES", 5 * 1024 * 1024)),
            backupCount=int(app.config.get("LOG_FILE_BACKUP_COUNT", 3)),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        app.logger.addHandler(file_handler)


def init_extensions(app: Flask) -> None:
    """Init all Flask extensions in one place."""
    init_logging(app)
    db.init_app(app)
