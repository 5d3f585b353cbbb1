"""Ví dụ: chạy bảng lương một tháng bằng service layer (không cần CSDL).

Mục tiêu: minh hoạ luồng giờ công -> tổng hợp kỳ -> bảng lương với dữ liệu giả.
"""

from datetime import date, datetime
from decimal import Decimal

from src.payroll_engine.payroll_engine.attendance.model import SessionSet
from src.payroll_engine.payroll_engine.main import create_engine
from src.payroll_engine.payroll_engine.payroll.model import DeductionRule, PayrollTerms
from src.payroll_engine.payroll_engine.payroll.periods import PayPeriod


class DemoAttendance:
    def get_session_sets(self, *, employee_id, start_date, end_date):
        day = date(2025, 1, 6)
        return {
            day: SessionSet(
                morning_in=datetime(2025, 1, 6, 7, 55),
                morning_out=datetime(2025, 1, 6, 12, 2),
                afternoon_in=datetime(2025, 1, 6, 12, 58),
                afternoon_out=datetime(2025, 1, 6, 17, 10),
            )
        }


def main():
    container = create_engine(DemoAttendance())
    terms = PayrollTerms(
        base_salary=Decimal("25000"),
        deductions=(DeductionRule(name="SSS", percentage=Decimal("4.5")),),
    )
    run = container.payroll_run_service.run(PayPeriod.monthly(2025, 1), {1: terms})
    print(container.payroll_run_service.to_dataframe(run).to_string(index=False))


if __name__ == "__main__":
    main()
