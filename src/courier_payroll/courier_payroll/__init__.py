"""Courier Payroll package.

Feature modules (employees, deliveries, salary, payroll, reports, ...) with a
thin Flask controller layer over service/repository layers.
"""
