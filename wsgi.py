"""WSGI-энтрипоинт для прод-окружения.

Используется такими серверами, как gunicorn:
    gunicorn -c deploy/gunicorn.conf.py wsgi:app
"""

import os

from env_loader import load_dotenv_like

# Load .env if present
load_dotenv_like()

from trackr import create_app  # noqa: E402
from trackr.config import DevelopmentConfig, ProductionConfig, TestingConfig  # noqa: E402

_CONFIGS = {
    "prod": ProductionConfig,
    "production": ProductionConfig,
    "dev": DevelopmentConfig,
    "development": DevelopmentConfig,
    "test": TestingConfig,
    "testing": TestingConfig,
}


def get_config_class():
    """Класс конфигурации по APP_CONFIG; по умолчанию ProductionConfig."""
    cfg_name = os.environ.get("APP_CONFIG", "production").strip().lower()
    return _CONFIGS.get(cfg_name, ProductionConfig)


app = create_app(get_config_class())
