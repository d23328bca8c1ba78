"""Member ORM — a gym member enrolled in exactly one plan.

Invariants:
    - plan_id must reference an existing plan (FK, ON DELETE RESTRICT)
    - email <= 100 chars, age 16-100 (checked at the API boundary)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Member(Base):
    """Member entity."""
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("plans.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )

    plan: Mapped["Plan"] = relationship(
        "Plan", back_populates="members", lazy="raise",
    )
