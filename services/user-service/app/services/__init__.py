"""
Application layer - customer and employee use cases.
"""

from .customer_manager import CustomerManager
from .employee_manager import EmployeeManager

__all__ = ["CustomerManager", "EmployeeManager"]
