"""Punch Sync package.

Operator console for reviewing and correcting daily attendance punches against a
remote record store. Organized by feature modules (attendance, employees,
reports) over a shared remote executor, with a thin Flask controller layer.
"""
