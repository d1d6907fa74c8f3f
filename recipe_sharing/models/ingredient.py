from sqlalchemy import String, Integer, Boolean, Numeric, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from recipe_sharing.models.base import Base, TimestampMixin, HouseholdOwnedMixin


class Ingredient(Base, TimestampMixin, HouseholdOwnedMixin):
    """
    Ingredient catalogue entry owned by a household.

    Shared through the recipes that reference it. Household-owned copies are
    reclaimed by the orphan cleanup once no recipe references them.
    """

    __tablename__ = "ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    fresh: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    cost: Mapped[float | None] = mapped_column(Numeric(precision=10, scale=2), nullable=True)
    stockcode: Mapped[str | None] = mapped_column(String(64), nullable=True)
    supermarket_category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    pantry_category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("household_id", "parent_id", name="uq_ingredients_household_parent"),
    )

    def __repr__(self) -> str:
        return f"<Ingredient(id={self.id}, name='{self.name}', household_id={self.household_id})>"
