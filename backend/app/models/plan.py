"""Plan ORM — a gym plan tier with its price and trainer.

Invariants:
    - name is one of PlanName (checked at the API boundary)
    - price is stored as Numeric(10, 2) and read back as float
    - Owns zero or more members and exercises (FK on the child)

Design Decisions:
    - lazy="raise" on relationships: every eager load is explicit (selectinload),
      an accidental lazy load in async code fails loudly
    - passive_deletes="all": the ORM never nulls children; ON DELETE RESTRICT decides
"""

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Plan(Base):
    """Plan entity, parent of members and exercises."""
    __tablename__ = "plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False,
    )
    trainer: Mapped[str] = mapped_column(String(100), nullable=False)

    members: Mapped[list["Member"]] = relationship(
        "Member", back_populates="plan", lazy="raise",
        passive_deletes="all", order_by="Member.id",
    )
    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="plan", lazy="raise",
        passive_deletes="all", order_by="Exercise.id",
    )
