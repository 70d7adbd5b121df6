from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceRecord
from src.attendance_payroll.attendance_payroll.common.datetime_utils import iter_month_days
from src.attendance_payroll.attendance_payroll.core.enums import SessionStatus
from src.attendance_payroll.attendance_payroll.employees.model import LabourEmployee, StaffEmployee
from src.attendance_payroll.attendance_payroll.holidays.calendar import is_working_day
from src.attendance_payroll.attendance_payroll.payroll.service import PayrollReportService

P = SessionStatus.PRESENT


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = {e.employee_id: e for e in employees}

    def list_active(self):
        return [e for e in self._employees.values() if e.is_active]

    def get_by_id(self, employee_id):
        return self._employees.get(employee_id)


class FakeDatedRepo:
    def __init__(self, items):
        self._items = items
        self.last_args = None

    def list_between(self, *, start_date: date, end_date: date, employee_id=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "employee_id": employee_id}
        return [
            i
            for i in self._items
            if start_date <= i.work_date <= end_date and (employee_id is None or i.employee_id == employee_id)
        ]


class FakeHolidayRepo:
    def list_all(self):
        return []


STAFF = StaffEmployee(employee_id="s1", name="Anu", employee_code="ST001", monthly_salary=Decimal("25000"))
LABOUR = LabourEmployee(employee_id="l1", name="Bala", employee_code="LB001", daily_salary=Decimal("800"))
RETIRED = LabourEmployee(
    employee_id="l2", name="Chitra", employee_code="LB002", daily_salary=Decimal("700"), is_active=False
)


def _attendance():
    rows = [
        AttendanceRecord(attendance_id=f"s1-{d}", employee_id="s1", work_date=d, fn_status=P, an_status=P)
        for d in iter_month_days(2024, 1)
        if is_working_day(d, [])
    ]
    rows.append(
        AttendanceRecord(
            attendance_id="l1-1",
            employee_id="l1",
            work_date=date(2024, 2, 5),
            fn_status=P,
            an_status=P,
            actual_start_time="08:00",
            actual_end_time="18:00",
        )
    )
    return rows


def _service(attendance_repo=None):
    return PayrollReportService(
        FakeEmployeeRepo([STAFF, LABOUR, RETIRED]),
        attendance_repo or FakeDatedRepo(_attendance()),
        FakeDatedRepo([]),
        FakeHolidayRepo(),
    )


def test_report_for_all_active_employees():
    report = _service().build_salary_report(year=2024, month=1)

    assert [r.employee.employee_code for r in report.reports] == ["LB001", "ST001"]
    assert report.summary.total_employees == 2
    assert report.summary.total_basic_salary == Decimal("25800.00")
    assert report.summary.total_ot_amount == Decimal("187.50")
    assert report.summary.total_net_salary == Decimal("25987.50")
    assert report.summary.total_deductions == Decimal("0.00")
    assert report.summary.average_attendance == Decimal("52.00")
    assert report.rows[0]["Net Salary"] == "987.50"


def test_report_queries_the_month_range():
    repo = FakeDatedRepo(_attendance())
    _service(repo).build_salary_report(year=2024, month=1, employee_id="l1")

    assert repo.last_args == {"start_date": date(2024, 2, 1), "end_date": date(2024, 2, 29), "employee_id": "l1"}


def test_report_for_single_employee():
    report = _service().build_salary_report(year=2024, month=1, employee_id="l1")

    assert len(report.reports) == 1
    assert report.reports[0].net_salary == Decimal("987.50")


def test_report_for_unknown_employee_is_empty():
    report = _service().build_salary_report(year=2024, month=1, employee_id="nobody")

    assert report.reports == []
    assert report.summary.total_employees == 0
    assert report.summary.average_attendance == Decimal("0.00")
