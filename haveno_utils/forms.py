"""
Payment-account form access.

A payment-account form is an ordered list of fields, each identified by a
field id.  Lookups scan the list in order and act on the first match.
No business validation happens here; values are stored as strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from haveno_utils.errors import FieldNotFound


class FieldId(str, Enum):
    """Well-known payment-account form field ids."""
    ACCEPTED_COUNTRY_CODES = "ACCEPTED_COUNTRY_CODES"
    ACCOUNT_ID = "ACCOUNT_ID"
    ACCOUNT_NAME = "ACCOUNT_NAME"
    ACCOUNT_NR = "ACCOUNT_NR"
    ACCOUNT_OWNER = "ACCOUNT_OWNER"
    ACCOUNT_TYPE = "ACCOUNT_TYPE"
    ADDRESS = "ADDRESS"
    BANK_NAME = "BANK_NAME"
    BIC = "BIC"
    CITY = "CITY"
    COUNTRY = "COUNTRY"
    EMAIL = "EMAIL"
    EMAIL_OR_MOBILE_NR = "EMAIL_OR_MOBILE_NR"
    EXTRA_INFO = "EXTRA_INFO"
    HOLDER_NAME = "HOLDER_NAME"
    IBAN = "IBAN"
    MOBILE_NR = "MOBILE_NR"
    SALT = "SALT"
    SORT_CODE = "SORT_CODE"
    STATE = "STATE"
    TRADE_CURRENCIES = "TRADE_CURRENCIES"
    USER_NAME = "USER_NAME"


def _field_key(field_id: FieldId | str) -> str:
    return field_id.value if isinstance(field_id, FieldId) else str(field_id)


@dataclass
class PaymentAccountFormField:
    """One field of a payment-account form."""
    id: str
    value: str = ""
    label: str = ""
    required: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "value": self.value,
            "label": self.label,
            "required": self.required,
        }

    @classmethod
    def from_dict(cls, d: dict) -> PaymentAccountFormField:
        return cls(
            id=_field_key(d["id"]),
            value=str(d.get("value", "")),
            label=d.get("label", ""),
            required=bool(d.get("required", False)),
        )


@dataclass
class PaymentAccountForm:
    """Ordered field list for one payment method."""
    payment_method_id: str
    fields: list[PaymentAccountFormField] = field(default_factory=list)

    def find_field(self, field_id: FieldId | str) -> PaymentAccountFormField:
        key = _field_key(field_id)
        for f in self.fields:
            if f.id == key:
                return f
        raise FieldNotFound(key)

    def to_dict(self) -> dict:
        return {
            "payment_method_id": self.payment_method_id,
            "fields": [f.to_dict() for f in self.fields],
        }

    @classmethod
    def from_dict(cls, d: dict) -> PaymentAccountForm:
        return cls(
            payment_method_id=d["payment_method_id"],
            fields=[PaymentAccountFormField.from_dict(f) for f in d.get("fields", [])],
        )


def get_form_value(form: PaymentAccountForm, field_id: FieldId | str) -> str:
    """Return the value of the first field matching *field_id*."""
    return form.find_field(field_id).value


def set_form_value(form: PaymentAccountForm, field_id: FieldId | str, value: object) -> None:
    """Set the value of the first field matching *field_id*."""
    form.find_field(field_id).value = str(value)
