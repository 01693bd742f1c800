"""
Meal model - the only persisted entity.
"""

from sqlalchemy import Column, Text, Boolean, DateTime, Uuid, CheckConstraint
import uuid

from domain.models.database import Base


class Meal(Base):
    """A meal registered under a session identity"""

    __tablename__ = "meals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    in_diet = Column(Boolean, nullable=False)
    # Naive timestamp built from the caller's date and time, never updated
    created_at = Column(DateTime(timezone=False), nullable=False)
    session_id = Column(Text, nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_meals_name_not_empty"),
    )

    def __repr__(self) -> str:
        return f"<Meal id={self.id} name={self.name!r} in_diet={self.in_diet}>"
