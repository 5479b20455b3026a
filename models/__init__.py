"""
models/ - Domain Layer
======================
Plain data classes describing the records the service manages.
"""

from .employee import Employee, EmployeeBuilder

__all__ = ['Employee', 'EmployeeBuilder']
