import pytest
from sqlalchemy import func, select

from team_roster.db.database import DataBase
from team_roster.db.models.team_person import TeamPerson as TeamPersonModel
from team_roster.db.schemas.person import Person
from team_roster.db.stores.person import PersonStore
from team_roster.services.team import TeamRepository


@pytest.fixture
def database(tmp_path):
    """File-backed SQLite per test so every session sees the same data."""
    db = DataBase(f"sqlite:///{tmp_path / 'teams.db'}", echo=False)
    db.create_all()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def person_store(database):
    return PersonStore(database)


@pytest.fixture
def repository(database, person_store):
    return TeamRepository(database, person_store)


@pytest.fixture
def people(person_store):
    """Three persisted persons, ids ascending."""
    return [
        person_store.save(Person(name="Ada Lovelace", email="ada@example.com")),
        person_store.save(Person(name="Alan Turing", email="alan@example.com")),
        person_store.save(Person(name="Grace Hopper")),
    ]


@pytest.fixture
def count_team_person_rows(database):
    def _count() -> int:
        with database.session() as s:
            return int(s.execute(select(func.count()).select_from(TeamPersonModel)).scalar_one())
    return _count
