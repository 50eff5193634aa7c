"""
Вспомогательные функции для обработки запросов.

Здесь определяется роль текущего запроса и проверка прав перед
выполнением операции над ресурсом. Функции используются во всех
маршрутах и вынесены в отдельный модуль для переиспользования.
"""

from typing import Any, Dict, Iterable, Optional

from flask import abort, current_app, request, session

from .services.permissions_service import Decision, Operation, Role, decide


def session_role() -> Optional[Role]:
    """Роль из cookie-сессии (выставляется при /login).

    Неизвестное значение роли считается отсутствием аутентификации.
    """
    return Role.parse(session.get('role'))


def current_role() -> Optional[Role]:
    """Роль текущего запроса.

    Источник роли можно подменить через ``ROLE_RESOLVER`` в конфиге
    (функция без аргументов). По умолчанию это cookie-сессия.
    """
    resolver = current_app.config.get('ROLE_RESOLVER') or session_role
    return Role.parse(resolver())


def session_actor() -> Optional[str]:
    return session.get('email') or session.get('username')


def current_actor() -> Optional[str]:
    """Кто выполняет запрос, для логов и аудита.

    Как и роль, подменяется через ``ACTOR_RESOLVER``; по умолчанию email
    из сессии.
    """
    resolver = current_app.config.get('ACTOR_RESOLVER') or session_actor
    return resolver()


def authorize(operation: Operation, allowed_methods: Iterable[str] = ()) -> Role:
    """Проверить, что текущий запрос может выполнить операцию.

    Бросает 405 для неэкспортируемых операций, 401 без сессии и
    403 при недостаточной роли. Возвращает роль при успехе.
    """
    role = current_role()
    decision = decide(operation, role)
    if decision is Decision.ALLOW:
        return role

    if decision is Decision.NOT_SUPPORTED:
        abort(405, valid_methods=sorted(allowed_methods))
    if decision is Decision.UNAUTHENTICATED:
        abort(401)

    current_app.logger.warning(
        'Denied %s %s: operation=%s role=%s actor=%s',
        request.method, request.path, operation.value, role.value, current_actor(),
    )
    abort(403)


def get_json_object() -> Dict[str, Any]:
    """Тело запроса как JSON-объект; 400, если это не объект."""
    data = request.get_json(silent=True, force=True)
    if not isinstance(data, dict):
        abort(400, description='Invalid JSON')
    return data
