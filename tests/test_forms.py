"""
Test suite for haveno_utils.forms - payment-account form field access.

Covers:
  - get_form_value / set_form_value by FieldId and by plain string
  - First match wins in the ordered field list
  - FieldNotFound for absent ids
  - to_dict / from_dict
"""

import unittest

import pytest

from haveno_utils.errors import FieldNotFound, HavenoUtilsError
from haveno_utils.forms import (
    FieldId,
    PaymentAccountForm,
    PaymentAccountFormField,
    get_form_value,
    set_form_value,
)


class TestFormAccess:

    def test_get_by_field_id(self, revolut_form):
        assert get_form_value(revolut_form, FieldId.USER_NAME) == "alice"

    def test_get_by_string(self, revolut_form):
        assert get_form_value(revolut_form, "TRADE_CURRENCIES") == "EUR,USD"

    def test_first_match_wins(self, revolut_form):
        set_form_value(revolut_form, FieldId.USER_NAME, "bob")
        assert revolut_form.fields[1].value == "bob"
        assert revolut_form.fields[3].value == "shadowed"

    def test_set_then_get(self, revolut_form):
        set_form_value(revolut_form, FieldId.ACCOUNT_NAME, "My Revolut")
        assert get_form_value(revolut_form, FieldId.ACCOUNT_NAME) == "My Revolut"

    def test_set_stores_strings(self, revolut_form):
        set_form_value(revolut_form, "ACCOUNT_NAME", 42)
        assert get_form_value(revolut_form, "ACCOUNT_NAME") == "42"

    def test_get_missing_field(self, revolut_form):
        with pytest.raises(FieldNotFound) as exc_info:
            get_form_value(revolut_form, FieldId.IBAN)
        assert exc_info.value.field_id == "IBAN"
        assert "does not have field IBAN" in str(exc_info.value)

    def test_set_missing_field(self, revolut_form):
        with pytest.raises(FieldNotFound):
            set_form_value(revolut_form, "NO_SUCH_FIELD", "x")

    def test_field_not_found_is_lookup_error(self, revolut_form):
        with pytest.raises(LookupError):
            get_form_value(revolut_form, FieldId.EMAIL)
        with pytest.raises(HavenoUtilsError):
            get_form_value(revolut_form, FieldId.EMAIL)

    def test_empty_form(self):
        form = PaymentAccountForm(payment_method_id="ZELLE")
        with pytest.raises(FieldNotFound):
            get_form_value(form, FieldId.EMAIL)


class TestFormSerialization(unittest.TestCase):

    def test_field_to_dict(self):
        f = PaymentAccountFormField(id="EMAIL", value="a@b.c", required=True)
        d = f.to_dict()
        self.assertEqual(d["id"], "EMAIL")
        self.assertEqual(d["value"], "a@b.c")
        self.assertTrue(d["required"])

    def test_field_from_dict_defaults(self):
        f = PaymentAccountFormField.from_dict({"id": FieldId.IBAN})
        self.assertEqual(f.id, "IBAN")
        self.assertEqual(f.value, "")
        self.assertFalse(f.required)

    def test_form_roundtrip(self):
        form = PaymentAccountForm(
            payment_method_id="SEPA",
            fields=[
                PaymentAccountFormField(id="HOLDER_NAME", value="Alice"),
                PaymentAccountFormField(id="IBAN", value="DE89370400440532013000"),
            ],
        )
        restored = PaymentAccountForm.from_dict(form.to_dict())
        self.assertEqual(restored, form)
        self.assertEqual(get_form_value(restored, FieldId.IBAN), "DE89370400440532013000")
