"""Pydantic v2 contracts for strict API input validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .models import FIELD_MAX_LENGTH


class StrictSchema(BaseModel):
    """Base strict schema: forbids unknown fields and strips strings."""

    model_config = ConfigDict(extra='forbid', str_strip_whitespace=True, populate_by_name=True)


class AddressWriteSchema(StrictSchema):
    """Address body for POST/PUT/PATCH.

    JSON keys are camelCase (``houseNumber``, ``zipCode``); snake_case names
    are accepted as well. Which keys were actually sent is available through
    ``model_fields_set`` and drives PATCH merging.

    Values are stored exactly as submitted, surrounding whitespace included.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    street: str | None = Field(default=None, max_length=FIELD_MAX_LENGTH)
    house_number: str | None = Field(default=None, max_length=FIELD_MAX_LENGTH, alias='houseNumber')
    city: str | None = Field(default=None, max_length=FIELD_MAX_LENGTH)
    zip_code: str | None = Field(default=None, max_length=FIELD_MAX_LENGTH, alias='zipCode')
    country: str | None = Field(default=None, max_length=FIELD_MAX_LENGTH)

    def replacement(self) -> dict[str, Any]:
        """All five fields, omitted ones as None (PUT semantics)."""
        return self.model_dump(by_alias=False)

    def changes(self) -> dict[str, Any]:
        """Only the fields present in the request body (PATCH semantics)."""
        return self.model_dump(by_alias=False, exclude_unset=True)


class LoginSchema(StrictSchema):
    """Credentials for POST /login."""

    email: str = Field(min_length=1, max_length=FIELD_MAX_LENGTH)
    password: str = Field(min_length=1, max_length=256)
