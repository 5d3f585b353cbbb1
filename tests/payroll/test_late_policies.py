from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.core.exceptions import ValidationError
from src.payroll_engine.payroll_engine.payroll.calculator.late_policies import (
    BlockLateDeduction,
    NoLateDeduction,
    PerMinuteLateDeduction,
    build_late_policy,
)

RATE = Decimal("120")


def test_per_minute_charges_minute_of_pay():
    assert PerMinuteLateDeduction().deduction(15, RATE) == Decimal("30")
    assert PerMinuteLateDeduction(multiplier=Decimal("1.5")).deduction(10, RATE) == Decimal("30")


def test_block_charges_every_started_block():
    policy = BlockLateDeduction(block_minutes=15)

    assert policy.deduction(15, RATE) == Decimal("30")
    assert policy.deduction(16, RATE) == Decimal("60")
    assert policy.deduction(0, RATE) == 0


@pytest.mark.parametrize("policy", [NoLateDeduction(), PerMinuteLateDeduction(), BlockLateDeduction()])
def test_policies_are_non_decreasing(policy):
    amounts = [policy.deduction(minutes, RATE) for minutes in range(0, 200)]

    assert amounts == sorted(amounts)
    assert all(a >= 0 for a in amounts)


def test_build_late_policy():
    assert isinstance(build_late_policy("none"), NoLateDeduction)
    assert isinstance(build_late_policy(" PER_MINUTE "), PerMinuteLateDeduction)
    assert build_late_policy("block", block_minutes=10) == BlockLateDeduction(block_minutes=10)

    with pytest.raises(ValidationError):
        build_late_policy("hourly")
