"""SQLAlchemy ORM model for Companies."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Company(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(60), nullable=False)
    country: Mapped[Optional[str]] = mapped_column(String(60), nullable=True)
