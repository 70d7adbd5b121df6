"""Ví dụ: tính lương một tháng từ các bản ghi thô (không qua CSDL).

Mục tiêu: minh hoạ luồng record -> mapper -> calculator -> báo cáo.
"""

from src.attendance_payroll.attendance_payroll.attendance.mapper import attendance_from_record
from src.attendance_payroll.attendance_payroll.employees.mapper import employee_from_record
from src.attendance_payroll.attendance_payroll.main import load_policy
from src.attendance_payroll.attendance_payroll.payroll.calculator.standard_calculator import StandardSalaryCalculator


def main():
    employee = employee_from_record(
        {"id": "l1", "name": "Bala", "employeeId": "LB001", "employeeType": "labour", "dailySalary": 800}
    )
    attendance = [
        attendance_from_record(
            {
                "id": "a1",
                "employeeId": "l1",
                "date": "2024-02-05",
                "fnStatus": "present",
                "anStatus": "present",
                "actualStartTime": "08:00",
                "actualEndTime": "18:00",
            }
        )
    ]

    calculator = StandardSalaryCalculator(load_policy())
    report = calculator.calculate(employee, attendance, [], [], 2024, 1)
    print(report.to_row())


if __name__ == "__main__":
    main()
