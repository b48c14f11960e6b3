"""Project ORM model."""

import datetime

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Project(Base):
    """A named project stamped with the day it was created.

    Attributes:
        id: Primary key, generated by the database.
        name: Short identifier (e.g., "P1"). Not unique.
        created_date: Calendar date the project was constructed on.
    """

    __tablename__ = "project"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    created_date: Mapped[datetime.date] = mapped_column(Date, default=datetime.date.today)

    def __init__(self, name: str, created_date: datetime.date | None = None) -> None:
        # Stamp at construction, not at flush.
        super().__init__(
            name=name,
            created_date=created_date if created_date is not None else datetime.date.today(),
        )

    def __repr__(self) -> str:
        return f"<Project id={self.id} name={self.name!r} created_date={self.created_date}>"
