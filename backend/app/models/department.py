"""ORM model for the `departments` table. Rows are only written by seeding."""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin


class Department(TimestampMixin, Base):
    """An organisational unit (Engineering, Marketing, ...)."""

    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Department(id={self.id}, name='{self.name}')>"
