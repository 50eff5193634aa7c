from __future__ import annotations

import pytest
from pydantic import ValidationError

from trackr.models import FIELD_MAX_LENGTH
from trackr.schemas import AddressWriteSchema, LoginSchema


def test_address_contract_camel_case_and_replacement():
    data = AddressWriteSchema.model_validate({'street': '  Main  ', 'zipCode': '01099'})

    assert data.street == '  Main  '
    assert data.replacement() == {
        'street': '  Main  ',
        'house_number': None,
        'city': None,
        'zip_code': '01099',
        'country': None,
    }
    assert data.changes() == {'street': '  Main  ', 'zip_code': '01099'}


def test_address_contract_explicit_null_is_a_change():
    data = AddressWriteSchema.model_validate({'city': None})
    assert data.changes() == {'city': None}


@pytest.mark.parametrize('payload', [
    {'unknown': 'x'},
    {'houseNumber': 12},
    {'country': 'x' * (FIELD_MAX_LENGTH + 1)},
])
def test_address_contract_rejects(payload):
    with pytest.raises(ValidationError):
        AddressWriteSchema.model_validate(payload)


def test_login_contract_requires_both_fields():
    with pytest.raises(ValidationError):
        LoginSchema.model_validate({'email': 'a@b.c', 'password': ''})


def test_login_contract_still_strips_email():
    data = LoginSchema.model_validate({'email': '  a@b.c ', 'password': 'pw'})
    assert data.email == 'a@b.c'
