"""
Модели базы данных для приложения.

Employee: сотрудник, под которым открывается сессия (роль
admin/supervisor/employee). Address: адрес с пятью текстовыми
полями. AuditLog: журнал действий, изменяющих данные.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.mutable import MutableDict

from .extensions import db


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Максимальная длина текстовых полей адреса (колонки и валидация тела).
FIELD_MAX_LENGTH = 255


# ---------------------------------------------------------------------------
# Сотрудники
# ---------------------------------------------------------------------------

class Employee(db.Model):
    """Сотрудник, который может войти в систему.

    Роль определяет, какие операции над ресурсами доступны
    в рамках сессии (см. services.permissions_service).
    """

    __tablename__ = 'employees'
    __table_args__ = (
        db.Index('ix_employees_email', 'email'),
    )

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    first_name = db.Column(db.String(255), nullable=True)
    last_name = db.Column(db.String(255), nullable=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(32), nullable=False, default='employee')  # employee|supervisor|admin
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)

    def set_password(self, password: str) -> None:
        """Устанавливает хеш пароля."""
        from werkzeug.security import generate_password_hash

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Проверяет пароль."""
        from werkzeug.security import check_password_hash

        return check_password_hash(self.password_hash, password)

    def __repr__(self) -> str:
        return f"<Employee {self.email}>"


# ---------------------------------------------------------------------------
# Адреса
# ---------------------------------------------------------------------------

class Address(db.Model):
    """Почтовый адрес (сотрудника, компании и т.п.).

    Все пять полей необязательны и меняются независимо. Идентификатор
    выдаёт база данных, после создания он не меняется. Даты создания
    и обновления хранятся в таблице, но наружу не отдаются.
    """

    __tablename__ = 'addresses'
    __table_args__ = (
        db.Index('ix_addresses_city_zip', 'city', 'zip_code'),
    )

    # Порядок полей в JSON-представлении: (имя атрибута, ключ в JSON).
    FIELDS = (
        ('street', 'street'),
        ('house_number', 'houseNumber'),
        ('city', 'city'),
        ('zip_code', 'zipCode'),
        ('country', 'country'),
    )

    id = db.Column(db.Integer, primary_key=True)
    street = db.Column(db.String(FIELD_MAX_LENGTH), nullable=True)
    house_number = db.Column(db.String(FIELD_MAX_LENGTH), nullable=True)
    city = db.Column(db.String(FIELD_MAX_LENGTH), nullable=True)
    zip_code = db.Column(db.String(FIELD_MAX_LENGTH), nullable=True)
    country = db.Column(db.String(FIELD_MAX_LENGTH), nullable=True)
    created_at = db.Column(db.DateTime, default=_utcnow)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Преобразовать запись в словарь для JSON‑выдачи."""
        data: Dict[str, Any] = {'id': self.id}
        for attr, key in self.FIELDS:
            data[key] = getattr(self, attr)
        return data

    def __repr__(self) -> str:
        return f"<Address {self.id}: {self.street} {self.house_number}, {self.zip_code} {self.city}>"


# ---------------------------------------------------------------------------
# Аудит действий (вход/выход, изменения адресов)
# ---------------------------------------------------------------------------

class AuditLog(db.Model):
    """Журнал действий сотрудников, изменяющих данные."""

    __tablename__ = 'audit_log'
    __table_args__ = (
        db.Index('ix_audit_log_actor', 'actor'),
        db.Index('ix_audit_log_action', 'action'),
    )

    id = db.Column(db.Integer, primary_key=True)
    ts = db.Column(db.DateTime, default=_utcnow, index=True)

    actor = db.Column(db.String(255), nullable=True)
    role = db.Column(db.String(32), nullable=True)

    ip = db.Column(db.String(64), nullable=True)
    method = db.Column(db.String(8), nullable=True)
    path = db.Column(db.String(255), nullable=True)

    action = db.Column(db.String(64), nullable=False)
    payload = db.Column(MutableDict.as_mutable(db.JSON().with_variant(JSONB, 'postgresql')), nullable=True)

