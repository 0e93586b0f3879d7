# db/schemas/team.py
from typing import List, Optional, Set
from pydantic import Field
from team_roster.db.schemas._base import OrmModel
from team_roster.db.schemas.person import Person

class Team(OrmModel):
    id: Optional[int] = None
    name: str
    point_of_contact_id: Optional[int] = None
    members: List[Person] = Field(default_factory=list)

    def add_member(self, person: Person) -> None:
        self.members.append(person)

    def member_ids(self) -> Set[int]:
        return {m.id for m in self.members if m.id is not None}
