"""Employee Management package.

This package is organized by feature modules (users, employees, salaries, ...)
with a thin Flask controller layer over service/repository layers.
"""
