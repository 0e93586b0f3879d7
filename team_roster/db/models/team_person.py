# db/models/team_person.py
from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column
from team_roster.db.models._base import Base

class TeamPerson(Base):
    __tablename__ = "team_person"

    team_id: Mapped[int] = mapped_column(Integer, ForeignKey("team.team_id"), primary_key=True)
    person_id: Mapped[int] = mapped_column(Integer, ForeignKey("person.person_id"), primary_key=True)
