"""HRMS payroll package.

This package is organized by feature modules (employees, attendance, timeoff,
payroll) with a thin Flask controller layer and service/repository layers.
The payroll engine itself is a set of pure functions over read records.
"""
