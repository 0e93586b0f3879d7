# db/mappers.py
"""
Row -> DTO decoders.

Each function receives one result row (anything exposing the selected column
names as attributes, e.g. ``sqlalchemy.engine.Row``) and builds the DTO field
by field. No I/O happens here.
"""
from typing import Any

from team_roster.db.schemas.person import Person
from team_roster.db.schemas.team import Team
from team_roster.db.schemas.team_person import TeamPerson


def team_from_row(row: Any) -> Team:
    return Team(
        id=row.team_id,
        name=row.name,
        point_of_contact_id=row.poc_person_id,
    )


def team_person_from_row(row: Any) -> TeamPerson:
    return TeamPerson(team_id=row.team_id, person_id=row.person_id)


def person_from_row(row: Any) -> Person:
    return Person(id=row.person_id, name=row.name, email=row.email)
