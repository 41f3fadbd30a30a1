"""Time-punch reconciliation package.

This package is organized by feature modules (punches, attendance, hours,
reports, payroll, ...) with a thin Flask controller layer on top of pure
service/engine layers and MySQL-backed repositories.
"""
