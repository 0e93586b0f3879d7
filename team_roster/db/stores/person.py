# db/stores/person.py
import logging
from typing import Optional, Protocol

from sqlalchemy import delete, func, insert, select, update

from team_roster.db.database import DataBase
from team_roster.db.mappers import person_from_row
from team_roster.db.models.person import Person as PersonModel
from team_roster.db.schemas.person import Person

logger = logging.getLogger(__name__)

_PERSON_COLUMNS = (PersonModel.person_id, PersonModel.name, PersonModel.email)


class PersonLookup(Protocol):
    """What the team repository needs from whoever owns Person rows."""

    def get(self, person_id: int) -> Optional[Person]: ...


class PersonStore:
    """
    Owner of the ``person`` table. Opens its own sessions; the team code only
    ever reads through ``get``.
    """

    def __init__(self, database: DataBase) -> None:
        self._database = database

    def get(self, person_id: int) -> Optional[Person]:
        if person_id is None:
            return None

        with self._database.session() as s:
            row = s.execute(select(*_PERSON_COLUMNS).where(PersonModel.person_id == person_id)).first()
        return person_from_row(row) if row is not None else None

    def save(self, person: Person) -> Person:
        """
        Insert when ``person.id`` is None, otherwise update name and email.

        Returns:
            Person: Snapshot re-read after commit.

        Raises:
            LookupError: If an update targets a missing person.
        """
        with self._database.session() as s:
            if person.id is None:
                stmt = (
                    insert(PersonModel)
                    .values(name=person.name, email=person.email)
                    .returning(PersonModel.person_id)
                )
                person_id = int(s.execute(stmt).scalar_one())
            else:
                res = s.execute(
                    update(PersonModel)
                    .where(PersonModel.person_id == person.id)
                    .values(name=person.name, email=person.email)
                    .execution_options(synchronize_session=False)
                )
                if res.rowcount == 0:
                    raise LookupError("Person not found.")
                person_id = person.id

        logger.debug("Saved person %s", person_id)
        return self.get(person_id)

    def count(self) -> int:
        with self._database.session() as s:
            return int(s.execute(select(func.count()).select_from(PersonModel)).scalar_one())

    def delete(self, person_id: int) -> None:
        with self._database.session() as s:
            s.execute(
                delete(PersonModel)
                .where(PersonModel.person_id == person_id)
                .execution_options(synchronize_session=False)
            )
