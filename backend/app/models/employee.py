"""
Employee Directory Backend: Employee SQLAlchemy Model
======================================================

What:  ORM model for the `employees` table.
Who:   Used by the entity store for CRUD and by the seed operation.

Table Design:
    - Integer autoincrement id: the API addresses employees by numeric id
      (/employees/details/1)
    - name/email: free text, nullable at the database level; presence is
      checked by the service on create only
    - Department and role are NOT columns here: they live in the
      employee_departments / employee_roles join tables
"""

from typing import Optional

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin


class Employee(TimestampMixin, Base):
    """
    A person in the directory.

    Lifecycle:
        1. Created by /seed_db (bulk) or POST /employees/new
        2. Scalar fields overwritten by POST /employees/update/{id}
        3. Hard-deleted by POST /employees/delete; join rows stay behind
    """

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Backs GET /employees/sort-by-name
    __table_args__ = (
        Index("idx_employees_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.name}')>"
