"""ORM model for the `roles` table. Rows are only written by seeding."""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin


class Role(TimestampMixin, Base):
    """A job title an employee can hold."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, title='{self.title}')>"
