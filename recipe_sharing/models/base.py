from datetime import datetime, UTC

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, declared_attr


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base shared by all models"""

    pass


class TimestampMixin:
    """Adds created_at / updated_at columns maintained by the ORM"""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )


class HouseholdOwnedMixin:
    """
    Ownership and copy lineage shared by collections, recipes and ingredients.

    household_id is the single household allowed to mutate the row.
    parent_id is set only on private copies and points at the row the copy
    was made from; (household_id, parent_id) is unique per table so a
    household holds at most one copy of any source row.
    """

    @declared_attr
    def household_id(cls) -> Mapped[int]:
        return mapped_column(
            Integer,
            ForeignKey("households.id", ondelete="CASCADE"),
            nullable=False,
            index=True,  # Critical for multi-tenant queries
        )

    @declared_attr
    def parent_id(cls) -> Mapped[int | None]:
        return mapped_column(
            Integer,
            ForeignKey(f"{cls.__tablename__}.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        )
