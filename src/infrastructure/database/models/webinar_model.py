"""Webinar SQLAlchemy model."""

from datetime import datetime
from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class WebinarModel(Base):
    """SQLAlchemy model for webinars."""

    __tablename__ = "webinars"

    # Primary key, generated by the application
    id: Mapped[str] = mapped_column(String(255), primary_key=True)

    # Ownership
    organizer_id: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    # Schedule
    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False
    )
    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False
    )

    seats: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<WebinarModel(id={self.id}, title={self.title}, seats={self.seats})>"
