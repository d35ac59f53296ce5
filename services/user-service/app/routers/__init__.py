"""
API routers for the user service.
"""

from .customer_router import router as customer_router
from .employee_router import router as employee_router

__all__ = ["customer_router", "employee_router"]
