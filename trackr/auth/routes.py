"""
Маршруты входа и выхода сотрудника.

Используются cookie‑сессии: после успешного /login в сессии
хранятся id, email и роль сотрудника. Роль читается в
helpers.current_role() при проверке прав.
"""

from flask import Response, current_app, jsonify, session
from pydantic import ValidationError

from ..audit.logger import log_action
from ..helpers import current_role, get_json_object
from ..schemas import LoginSchema
from ..services.permissions_service import verify_employee_credentials

from . import bp


@bp.post('/login')
def login() -> Response:
    """
    Вход сотрудника.

    Клиент отправляет JSON с полями 'email' и 'password'. При успешной
    проверке в сессии выставляются:

    - session['employee_id'] = <id сотрудника>;
    - session['email'] = <email>;
    - session['role'] = <admin|supervisor|employee>.
    """
    try:
        creds = LoginSchema.model_validate(get_json_object())
    except ValidationError as e:
        return jsonify({'error': 'Validation failed', 'details': e.errors(include_url=False)}), 400

    employee = verify_employee_credentials(creds.email, creds.password)
    if employee is None:
        current_app.logger.warning('Failed login for %s', creds.email)
        return jsonify({'error': 'Invalid credentials'}), 401
    if not employee.is_active:
        return jsonify({'error': 'Account disabled'}), 403

    session.clear()
    session.permanent = True
    session['employee_id'] = employee.id
    session['email'] = employee.email
    session['role'] = employee.role
    current_app.logger.info('Login %s (%s)', employee.email, employee.role)
    log_action('auth.login', {'email': employee.email})
    return jsonify({'status': 'ok', 'role': employee.role}), 200


@bp.post('/logout')
def logout() -> Response:
    """Выйти из сессии (очистить cookie-сессию)."""
    if session.get('email'):
        log_action('auth.logout')
    session.clear()
    return ('', 204)


@bp.get('/me')
def me() -> Response:
    """Текущая сессия (удобно для UI/диагностики)."""
    role = current_role()
    return jsonify({
        'authenticated': role is not None,
        'role': role.value if role else None,
        'email': session.get('email'),
    }), 200
