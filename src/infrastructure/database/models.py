"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ChefProfileModel(Base):
    """Chef profile model, one row per owner identity."""

    __tablename__ = "chef_profiles"
    __table_args__ = (
        CheckConstraint(
            "experience_level BETWEEN 2 AND 75",
            name="ck_chef_profiles_experience_level",
        ),
    )

    owner_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
    )
    chef_name: Mapped[str] = mapped_column(String(100), nullable=False)
    experience_level: Mapped[int] = mapped_column(Integer, nullable=False)
    cuisine_specialties: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    signature_dishes: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    recipe_collection: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )
