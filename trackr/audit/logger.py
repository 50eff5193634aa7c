"""Audit logging helpers for actions that change data."""

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import current_app, request
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..helpers import current_actor, current_role
from ..models import AuditLog


def _client_ip() -> Optional[str]:
    # IP: учитываем reverse-proxy
    return (request.headers.get('X-Forwarded-For') or '').split(',')[0].strip() or request.remote_addr


def log_action(action: str, payload: Optional[Dict[str, Any]] = None, actor: Optional[str] = None) -> None:
    """Записать действие сотрудника в журнал аудита.

    Роль и автор берутся так же, как при проверке прав
    (helpers.current_role / current_actor).

    Best-effort: ошибка записи журнала не должна ломать основную
    операцию, поэтому она откатывается и только логируется.
    """
    role = current_role()
    row = AuditLog(
        actor=actor or current_actor(),
        role=role.value if role else None,
        ip=_client_ip(),
        method=request.method,
        path=request.path,
        action=action,
        payload=dict(payload or {}),
    )
    try:
        db.session.add(row)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Не удалось записать аудит %s', action)
