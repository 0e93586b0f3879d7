# db/models/team.py
from typing import Optional
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from team_roster.db.models._base import Base

class Team(Base):
    __tablename__ = "team"

    team_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)

    # No ON DELETE action: Person rows are owned elsewhere and must not cascade.
    poc_person_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("person.person_id"), nullable=True
    )
