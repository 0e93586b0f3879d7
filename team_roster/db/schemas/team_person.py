# db/schemas/team_person.py
from pydantic import ConfigDict
from team_roster.db.schemas._base import OrmModel


class TeamPerson(OrmModel):
    """Membership row: existence of the (team_id, person_id) pair is the whole payload."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    team_id: int
    person_id: int
