# Точка входа ДЛЯ РАЗРАБОТКИ (debug server)
# В продакшене использовать wsgi.py + gunicorn.

"""Точка входа для запуска Flask‑приложения trackr.

Конфигурация выбирается на основе переменной окружения:

- ``APP_ENV=production`` или ``FLASK_ENV=production`` → ProductionConfig
- во всех остальных случаях используется DevelopmentConfig.
"""

import os

from env_loader import load_dotenv_like

# Load .env if present
load_dotenv_like()

from trackr import create_app  # noqa: E402
from trackr.config import DevelopmentConfig, ProductionConfig  # noqa: E402


def _select_config_class() -> type:
    """Выбрать класс конфигурации в зависимости от окружения.

    Приоритет имеет переменная ``APP_ENV``, затем ``FLASK_ENV``.
    Любое значение, начинающееся с ``prod``, приводит к выбору
    :class:`ProductionConfig`.
    """
    env = (os.getenv('APP_ENV') or os.getenv('FLASK_ENV') or 'development').lower()
    if env.startswith('prod'):
        return ProductionConfig
    return DevelopmentConfig


def main() -> None:
    app = create_app(_select_config_class())
    app.run(
        host=os.environ.get('HOST', '127.0.0.1'),
        port=int(os.environ.get('PORT', 5000)),
        debug=app.config.get('DEBUG', True),
    )


if __name__ == '__main__':
    main()
