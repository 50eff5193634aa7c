"""Сервисный слой для работы с адресами.

Выборка, создание, замена и частичное обновление адресов вынесены
в отдельные функции, чтобы маршруты занимались только HTTP, а
логику можно было тестировать без клиента.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models import Address
from ..schemas import AddressWriteSchema


def _commit() -> None:
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Ошибка сохранения адреса')
        raise


def _apply(address: Address, values: Dict[str, Any]) -> None:
    for attr, value in values.items():
        setattr(address, attr, value)


# Диапазон INTEGER в SQLite/BIGINT в PostgreSQL.
MAX_ID = 2 ** 63 - 1


def get_address(address_id: int) -> Optional[Address]:
    """Найти адрес по идентификатору.

    Идентификаторы вне диапазона колонки не существуют: None без запроса к БД.
    """
    if not 0 < address_id <= MAX_ID:
        return None
    return db.session.get(Address, address_id)


def create_address(data: AddressWriteSchema) -> Address:
    """Создать адрес из провалидированного тела запроса."""
    address = Address()
    _apply(address, data.replacement())
    db.session.add(address)
    _commit()
    return address


def replace_address(address: Address, data: AddressWriteSchema) -> Address:
    """Заменить все поля адреса; не переданные поля становятся None."""
    _apply(address, data.replacement())
    _commit()
    return address


def patch_address(address: Address, data: AddressWriteSchema) -> Address:
    """Изменить только те поля, что пришли в теле запроса."""
    _apply(address, data.changes())
    _commit()
    return address


def seed_addresses(count: int) -> List[Address]:
    """Заполнить таблицу тестовыми адресами street_i/city_i/...

    Нумерация продолжается с текущего количества записей, поэтому
    повторный запуск не дублирует значения.
    """
    start = Address.query.count()
    items = []
    for i in range(start, start + count):
        items.append(Address(
            street=f'street_{i}',
            house_number=str(i),
            city=f'city_{i}',
            zip_code=f'{i:05d}',
            country=f'country_{i}',
        ))
    db.session.add_all(items)
    _commit()
    return items
