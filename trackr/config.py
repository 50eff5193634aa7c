"""
Модуль конфигурации приложения.

Здесь определяются классы конфигурации Flask для разработки,
тестов и продакшена. Все секреты и пути читаются из переменных
окружения, чтобы не хранить их в коде.
"""

import os
import secrets
import warnings
from datetime import timedelta
from typing import Optional


def _safe_secret_key() -> str:
    """Получить SECRET_KEY из env или сгенерировать случайный.

    В продакшене ВСЕГДА задавайте SECRET_KEY через переменную окружения,
    иначе при перезапуске сервера все сессии инвалидируются.
    """
    key = os.environ.get("SECRET_KEY", "").strip()
    if not key:
        key = secrets.token_hex(32)
        if os.environ.get("FLASK_ENV") != "development":
            warnings.warn(
                "SECRET_KEY не задан! Используется случайный ключ. "
                "Установите SECRET_KEY в переменных окружения для production.",
                RuntimeWarning,
                stacklevel=2,
            )
    return key


def _admin_password_hash(default: Optional[str] = None) -> Optional[str]:
    """Хеш пароля администратора из ADMIN_PASSWORD_HASH или ADMIN_PASSWORD.

    Без обеих переменных используется ``default``; None отключает
    создание администратора при старте.
    """
    if os.environ.get("ADMIN_PASSWORD_HASH"):
        return os.environ["ADMIN_PASSWORD_HASH"]
    password = os.environ.get("ADMIN_PASSWORD") or default
    if not password:
        return None
    from werkzeug.security import generate_password_hash

    return generate_password_hash(password)


class Config:
    """Базовый класс конфигурации."""

    BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

    # Основная база данных: сотрудники, адреса, журнал аудита.
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URI", f"sqlite:///{os.path.join(BASE_DIR, 'trackr.db')}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = _safe_secret_key()

    # --- Cookie-сессии ---
    SESSION_COOKIE_NAME = os.environ.get("SESSION_COOKIE_NAME", "trackr_session")
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.environ.get("SESSION_COOKIE_SAMESITE", "Lax")
    SESSION_COOKIE_SECURE = os.environ.get("SESSION_COOKIE_SECURE", "0") == "1"
    PERMANENT_SESSION_LIFETIME = timedelta(hours=int(os.environ.get("SESSION_LIFETIME_HOURS", 12)))

    # Учётная запись администратора, создаётся при старте, если её нет в базе.
    # Если передан только пароль, он хешируется при загрузке конфигурации.
    # Без пароля администратор не создаётся (кроме DevelopmentConfig).
    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@trackr.local")
    ADMIN_PASSWORD_HASH = _admin_password_hash()

    # LOG_LEVEL и LOG_FILE. По умолчанию уровень INFO и вывод только в консоль.
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")
    LOG_FILE_MAX_BYTES = int(os.environ.get("LOG_FILE_MAX_BYTES", 5 * 1024 * 1024))
    LOG_FILE_BACKUP_COUNT = int(os.environ.get("LOG_FILE_BACKUP_COUNT", 3))

    # Функция без аргументов, возвращающая Role текущего запроса или None.
    # None здесь означает «читать роль из cookie-сессии» (helpers.session_role).
    ROLE_RESOLVER = None
    # То же для имени того, кто выполняет запрос (логи и журнал аудита).
    ACTOR_RESOLVER = None


class DevelopmentConfig(Config):
    """Настройки для режима разработки."""

    DEBUG = True
    SEND_FILE_MAX_AGE_DEFAULT = 0
    # Локально админ admin@trackr.local / secret, если пароль не задан.
    ADMIN_PASSWORD_HASH = _admin_password_hash(default="secret")


class TestingConfig(Config):
    """Настройки для тестов."""

    TESTING = True
    DEBUG = True
    LOG_LEVEL = "DEBUG"
    LOG_FILE = None


class ProductionConfig(Config):
    """Настройки для режима продакшена."""

    DEBUG = False
    # В продакшене по умолчанию считаем, что есть HTTPS.
    SESSION_COOKIE_SECURE = os.environ.get("SESSION_COOKIE_SECURE", "1") == "1"
