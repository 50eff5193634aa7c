"""
Пакет для работы с адресами.

Blueprint addresses содержит маршруты ресурса /addresses
(чтение, создание, замена и частичное обновление).
"""

from flask import Blueprint

bp = Blueprint('addresses', __name__)

from . import routes  # noqa: F401,E402
