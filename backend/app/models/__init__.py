"""SQLAlchemy models registered on app.database.Base."""

from app.models.associations import EmployeeDepartment, EmployeeRole
from app.models.department import Department
from app.models.employee import Employee
from app.models.role import Role

__all__ = ["Department", "Employee", "EmployeeDepartment", "EmployeeRole", "Role"]
