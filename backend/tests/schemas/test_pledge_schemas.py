"""Pledge Schemas — amount, trees count and message rules.

Invariants:
    - amount must parse and be strictly positive
    - message capped at 500 chars
    - userId optional, projectId required
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from greenpledge.schemas.pledge import PledgeCreate


def _pledge(**overrides) -> dict:
    data = {"projectId": str(uuid4()), "amount": "25.00"}
    data.update(overrides)
    return data


def test_minimal_anonymous_pledge():
    pledge = PledgeCreate.model_validate(_pledge())
    assert pledge.user_id is None
    assert pledge.amount == Decimal("25.00")


@pytest.mark.parametrize("amount", ["0", "-5", "abc", "", "0.001"])
def test_invalid_amounts_rejected(amount):
    with pytest.raises(ValidationError):
        PledgeCreate.model_validate(_pledge(amount=amount))


def test_smallest_positive_amount_accepted():
    assert PledgeCreate.model_validate(_pledge(amount="0.01")).amount == Decimal("0.01")


def test_message_limit():
    PledgeCreate.model_validate(_pledge(message="x" * 500))
    with pytest.raises(ValidationError):
        PledgeCreate.model_validate(_pledge(message="x" * 501))


def test_trees_count_integer_valued():
    with pytest.raises(ValidationError):
        PledgeCreate.model_validate(_pledge(treesCount="2.5"))
    assert PledgeCreate.model_validate(_pledge(treesCount="5")).trees_count == 5


def test_project_id_required():
    with pytest.raises(ValidationError):
        PledgeCreate.model_validate({"amount": "10"})


def test_blank_user_id_means_anonymous():
    assert PledgeCreate.model_validate(_pledge(userId="")).user_id is None
