"""
Shared pytest fixtures for the haveno-utils test suite.
"""

import logging

import pytest

from haveno_utils.forms import FieldId, PaymentAccountForm, PaymentAccountFormField
from haveno_utils.logging_config import VerbosityLogger


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def revolut_form():
    """Form with an ordered field list, including a duplicated id."""
    return PaymentAccountForm(
        payment_method_id="REVOLUT",
        fields=[
            PaymentAccountFormField(id=FieldId.ACCOUNT_NAME.value, label="Account name"),
            PaymentAccountFormField(id=FieldId.USER_NAME.value, value="alice", required=True),
            PaymentAccountFormField(id=FieldId.TRADE_CURRENCIES.value, value="EUR,USD"),
            PaymentAccountFormField(id=FieldId.USER_NAME.value, value="shadowed"),
        ],
    )


@pytest.fixture
def verbose_logger():
    """Logger that lets levels 0-2 through."""
    return VerbosityLogger(verbosity=2, name="haveno.test")
