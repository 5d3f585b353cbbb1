from __future__ import annotations

from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.core.enums import LateDeductionKind, ViolationCode
from src.payroll_engine.payroll_engine.core.exceptions import ConfigurationError
from src.payroll_engine.payroll_engine.payroll.settings import PayrollSettings, load_payroll_settings


def test_defaults_when_nothing_is_configured():
    assert load_payroll_settings() == PayrollSettings()
    assert load_payroll_settings({"expected_monthly_hours": None, "max_workers": " "}) == PayrollSettings()


def test_values_are_parsed():
    settings = load_payroll_settings(
        {
            "expectedMonthlyHours": "176",
            "OVERTIME_TO_LEAVE_RATIO": "0.25",
            "late_deduction_policy": "Block",
            "late_deduction_block_minutes": "10",
            "max_workers": 4,
        }
    )

    assert settings.expected_monthly_hours == Decimal("176")
    assert settings.overtime_to_leave_ratio == Decimal("0.25")
    assert settings.late_deduction_policy == LateDeductionKind.BLOCK
    assert settings.late_deduction_block_minutes == 10
    assert settings.max_workers == 4


@pytest.mark.parametrize("ratio", ["-0.5", "0"])
def test_overtime_ratio_must_be_positive(ratio):
    with pytest.raises(ConfigurationError) as exc_info:
        load_payroll_settings({"overtime_to_leave_ratio": ratio})

    (violation,) = exc_info.value.violations
    assert (violation.code, violation.field) == (ViolationCode.OUT_OF_RANGE, "overtime_to_leave_ratio")


def test_every_bad_payroll_setting_is_reported_together():
    with pytest.raises(ConfigurationError) as exc_info:
        load_payroll_settings(
            {
                "overtime_to_leave_ratio": "a lot",
                "late_deduction_policy": "hourly",
                "late_deduction_block_minutes": "ten",
                "max_workers": 0,
                "currency": "PHP",
            }
        )

    assert {(v.code, v.field) for v in exc_info.value.violations} == {
        (ViolationCode.NOT_A_NUMBER, "overtime_to_leave_ratio"),
        (ViolationCode.UNKNOWN_CHOICE, "late_deduction_policy"),
        (ViolationCode.NOT_A_NUMBER, "late_deduction_block_minutes"),
        (ViolationCode.OUT_OF_RANGE, "max_workers"),
        (ViolationCode.UNKNOWN_OPTION, "currency"),
    }
    assert "none, per_minute, block" in str(exc_info.value)
