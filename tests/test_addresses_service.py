import pytest
from sqlalchemy.exc import IntegrityError

from trackr.extensions import db
from trackr.models import Address
from trackr.schemas import AddressWriteSchema
from trackr.services.addresses_service import (
    create_address,
    get_address,
    patch_address,
    replace_address,
    seed_addresses,
)


def test_create_and_get_address(db_session):
    data = AddressWriteSchema.model_validate({'street': 'Main', 'houseNumber': '5', 'zipCode': '01099'})
    addr = create_address(data)

    assert addr.id is not None
    found = get_address(addr.id)
    assert found is addr
    assert found.house_number == '5'
    assert found.zip_code == '01099'
    assert found.city is None


def test_get_address_unknown(db_session):
    assert get_address(12345) is None


def test_replace_address_nulls_omitted_fields(db_session):
    addr = seed_addresses(1)[0]
    replace_address(addr, AddressWriteSchema.model_validate({'city': 'Dresden'}))

    db.session.expire_all()
    fresh = db.session.get(Address, addr.id)
    assert fresh.city == 'Dresden'
    assert fresh.street is None
    assert fresh.country is None


def test_patch_address_keeps_other_fields(db_session):
    addr = seed_addresses(1)[0]
    before = addr.to_dict()
    patch_address(addr, AddressWriteSchema.model_validate({'country': 'Germany'}))

    db.session.expire_all()
    assert db.session.get(Address, addr.id).to_dict() == {**before, 'country': 'Germany'}


def test_seed_addresses_continues_numbering(db_session):
    first = seed_addresses(2)
    second = seed_addresses(2)

    assert [a.street for a in first] == ['street_0', 'street_1']
    assert [a.street for a in second] == ['street_2', 'street_3']
    assert second[1].zip_code == '00003'
    assert Address.query.count() == 4


def test_commit_failure_rolls_back(db_session, monkeypatch):
    def _fail():
        raise IntegrityError('INSERT', {}, Exception('boom'))

    monkeypatch.setattr(db.session, 'commit', _fail)
    with pytest.raises(IntegrityError):
        create_address(AddressWriteSchema.model_validate({'street': 'x'}))

    monkeypatch.undo()
    assert Address.query.count() == 0
