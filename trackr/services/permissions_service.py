"""Сервис ролей и прав доступа.

Содержит:

- перечисления ролей, операций над ресурсом и решений политики;
- таблицу политики для ресурса адресов и функцию ``decide``;
- проверку логина/пароля сотрудника;
- начальное создание администратора по конфигу приложения.

``decide``: чистая функция (операция, роль) -> решение, без доступа
к запросу и базе данных. Превращение решения в HTTP-ошибку делает
helpers.authorize().
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from ..extensions import db
from ..models import Employee


class Role(str, Enum):
    ADMIN = 'admin'
    SUPERVISOR = 'supervisor'
    EMPLOYEE = 'employee'

    @classmethod
    def parse(cls, value) -> Optional['Role']:
        """Вернуть Role по строке или None для пустых/неизвестных значений."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or '').strip().lower())
        except ValueError:
            return None


class Operation(str, Enum):
    LIST = 'list'
    READ = 'read'
    CREATE = 'create'
    REPLACE = 'replace'
    PATCH = 'patch'
    DELETE = 'delete'


class Decision(str, Enum):
    ALLOW = 'allow'
    FORBIDDEN = 'forbidden'
    NOT_SUPPORTED = 'not_supported'
    UNAUTHENTICATED = 'unauthenticated'


# Операции, которые ресурс не экспортирует вообще (для любой роли).
NOT_EXPORTED = frozenset({Operation.LIST, Operation.DELETE})

# Кому разрешена операция. Всё, чего нет в таблице, запрещено.
ADDRESS_POLICY: Dict[Operation, frozenset] = {
    Operation.READ: frozenset({Role.ADMIN, Role.SUPERVISOR, Role.EMPLOYEE}),
    Operation.CREATE: frozenset({Role.ADMIN}),
    Operation.REPLACE: frozenset({Role.ADMIN}),
    Operation.PATCH: frozenset({Role.ADMIN}),
}


def decide(operation: Operation, role: Optional[Role]) -> Decision:
    """Решение политики для пары (операция, роль).

    Неэкспортируемые операции отклоняются до проверки сессии,
    неизвестные роли запрещены.
    """
    if operation in NOT_EXPORTED:
        return Decision.NOT_SUPPORTED
    if role is None:
        return Decision.UNAUTHENTICATED
    if role in ADDRESS_POLICY.get(operation, frozenset()):
        return Decision.ALLOW
    return Decision.FORBIDDEN


def get_employee_by_email(email: str) -> Optional[Employee]:
    """Найти сотрудника по email."""
    if not email:
        return None
    return Employee.query.filter_by(email=email.strip().lower()).first()


def verify_employee_credentials(email: str, password: str) -> Optional[Employee]:
    """Проверить email/пароль сотрудника.

    Возвращает объект Employee при успехе (в том числе неактивного,
    это проверяет вызывающий код), иначе None.
    """
    if not email or not password:
        return None
    employee = get_employee_by_email(email)
    if employee is None or not employee.password_hash:
        return None
    if not employee.check_password(password):
        return None
    return employee


def bootstrap_admin_from_config(app) -> None:
    """Создать администратора из ADMIN_EMAIL / ADMIN_PASSWORD_HASH.

    Если сотрудник с таким email уже есть, он не изменяется:
    пароль, сменённый после первого запуска, не перезаписывается.
    Без ADMIN_PASSWORD_HASH (пароль не задан явно) ничего не создаётся.
    """
    with app.app_context():
        email = (app.config.get('ADMIN_EMAIL') or '').strip().lower()
        password_hash = app.config.get('ADMIN_PASSWORD_HASH')
        if not email:
            return
        if Employee.query.filter_by(email=email).first() is not None:
            return
        if not password_hash:
            app.logger.warning("ADMIN_PASSWORD не задан, администратор %s не создан", email)
            return

        db.session.add(Employee(
            email=email,
            first_name='Admin',
            password_hash=password_hash,
            role=Role.ADMIN.value,
            is_active=True,
        ))
        db.session.commit()
        app.logger.info('Bootstrap admin %s created', email)
