"""
Маршруты для работы с адресами.

REST-ресурс /addresses: чтение одного адреса доступно любой
аутентифицированной роли, создание и изменение только для admin.
Список и удаление ресурс не экспортирует (405 для всех).
Проверка прав выполняется до любого обращения к базе.
"""

from flask import Response, abort, current_app, jsonify, url_for
from pydantic import ValidationError

from ..audit.logger import log_action
from ..helpers import authorize, current_actor, get_json_object
from ..schemas import AddressWriteSchema
from ..services import addresses_service
from ..services.permissions_service import Operation

from . import bp

# Методы, которые реально поддерживаются (для заголовка Allow в 405).
COLLECTION_METHODS = ('POST',)
ITEM_METHODS = ('GET', 'PUT', 'PATCH')


def _parse_body():
    """Провалидировать тело запроса; 400 с деталями при ошибке."""
    payload = get_json_object()
    # Идентификатор назначает сервер, из тела он игнорируется.
    payload.pop('id', None)
    try:
        return AddressWriteSchema.model_validate(payload)
    except ValidationError as e:
        response = jsonify({'error': 'Validation failed', 'details': e.errors(include_url=False)})
        response.status_code = 400
        abort(response)


def _get_or_404(address_id: int):
    address = addresses_service.get_address(address_id)
    if address is None:
        abort(404)
    return address


@bp.get('/addresses')
def list_addresses() -> Response:
    """Список адресов не экспортируется."""
    authorize(Operation.LIST, COLLECTION_METHODS)
    abort(405, valid_methods=sorted(COLLECTION_METHODS))


@bp.get('/addresses/<int:address_id>')
def get_address(address_id: int) -> Response:
    """Вернуть один адрес."""
    authorize(Operation.READ, ITEM_METHODS)
    return jsonify(_get_or_404(address_id).to_dict())


@bp.post('/addresses')
def create_address() -> Response:
    """Создать адрес. Только администратор."""
    authorize(Operation.CREATE, COLLECTION_METHODS)
    data = _parse_body()
    address = addresses_service.create_address(data)
    current_app.logger.info('Address %s created by %s', address.id, current_actor())
    log_action('address.create', {'id': address.id})

    response = jsonify(address.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('addresses.get_address', address_id=address.id, _external=True)
    return response


@bp.put('/addresses/<int:address_id>')
def replace_address(address_id: int) -> Response:
    """Заменить адрес целиком. Только администратор."""
    authorize(Operation.REPLACE, ITEM_METHODS)
    data = _parse_body()
    address = addresses_service.replace_address(_get_or_404(address_id), data)
    current_app.logger.info('Address %s replaced by %s', address.id, current_actor())
    log_action('address.replace', {'id': address.id})
    return jsonify(address.to_dict())


@bp.patch('/addresses/<int:address_id>')
def patch_address(address_id: int) -> Response:
    """Частично обновить адрес. Только администратор."""
    authorize(Operation.PATCH, ITEM_METHODS)
    data = _parse_body()
    address = addresses_service.patch_address(_get_or_404(address_id), data)
    current_app.logger.info('Address %s patched by %s', address.id, current_actor())
    log_action('address.patch', {'id': address.id, 'fields': sorted(data.model_fields_set)})
    return jsonify(address.to_dict())


@bp.delete('/addresses/<int:address_id>')
def delete_address(address_id: int) -> Response:
    """Адреса не удаляются через API."""
    authorize(Operation.DELETE, ITEM_METHODS)
    abort(405, valid_methods=sorted(ITEM_METHODS))
