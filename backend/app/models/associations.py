"""
Employee Directory Backend: Join Table Models
==============================================

What:  employee_departments and employee_roles, the two many-to-many links.

Table Design:
    - Surrogate integer id: join rows are iterated in ascending id order,
      which is insertion order. The resolver's "last row wins" rule depends
      on this ordering.
    - No ForeignKey constraints: deleting an employee leaves its join rows
      orphaned instead of cascading or failing. The resolver skips them.
    - Nullable target ids: an update that rewrites a join row without a new
      department/role id stores NULL, which resolves to nothing.
    - No uniqueness constraint: "one department per employee" is kept by the
      service (delete-then-insert), not by the schema.
"""

from typing import Optional

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin


class EmployeeDepartment(TimestampMixin, Base):
    """Links one employee to one department."""

    __tablename__ = "employee_departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    department_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)

    def __repr__(self) -> str:
        return (
            f"<EmployeeDepartment(employee_id={self.employee_id}, "
            f"department_id={self.department_id})>"
        )


class EmployeeRole(TimestampMixin, Base):
    """Links one employee to one role."""

    __tablename__ = "employee_roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    role_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<EmployeeRole(employee_id={self.employee_id}, role_id={self.role_id})>"
