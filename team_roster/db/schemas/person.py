# db/schemas/person.py
from typing import Optional
from team_roster.db.schemas._base import OrmModel

class Person(OrmModel):
    id: Optional[int] = None
    name: str
    email: Optional[str] = None
