# models/__init__.py

from .users import User
from .employee import Employee

__all__ = [
    "User",
    "Employee"
]
