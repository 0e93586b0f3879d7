import pytest
from sqlalchemy.exc import IntegrityError

from team_roster.db.schemas.team import Team
from team_roster.db.schemas.team_person import TeamPerson
from team_roster.db.stores.team import TeamStore
from team_roster.db.stores.team_person import TeamPersonStore


@pytest.fixture
def store():
    return TeamPersonStore()


@pytest.fixture
def team_id(database):
    with database.session() as s:
        return TeamStore().insert(s, Team(name="Alpha"))


def test_find_by_team_id_empty(database, store, team_id):
    with database.session() as s:
        assert store.find_by_team_id(s, team_id) == []


def test_insert_and_find(database, store, team_id, people):
    with database.session() as s:
        store.insert(s, TeamPerson(team_id=team_id, person_id=people[1].id))
        store.insert(s, TeamPerson(team_id=team_id, person_id=people[0].id))

    with database.session() as s:
        rows = store.find_by_team_id(s, team_id)

    assert rows == [
        TeamPerson(team_id=team_id, person_id=people[0].id),
        TeamPerson(team_id=team_id, person_id=people[1].id),
    ]


def test_insert_duplicate_pair_raises(database, store, team_id, people):
    tp = TeamPerson(team_id=team_id, person_id=people[0].id)
    with database.session() as s:
        store.insert(s, tp)

    with pytest.raises(IntegrityError):
        with database.session() as s:
            store.insert(s, tp)

    with database.session() as s:
        assert store.find_by_team_id(s, team_id) == [tp]


def test_insert_unknown_person_raises(database, store, team_id):
    with pytest.raises(IntegrityError):
        with database.session() as s:
            store.insert(s, TeamPerson(team_id=team_id, person_id=999))


def test_insert_unknown_team_raises(database, store, people):
    with pytest.raises(IntegrityError):
        with database.session() as s:
            store.insert(s, TeamPerson(team_id=999, person_id=people[0].id))


def test_delete_is_idempotent(database, store, team_id, people):
    keep = TeamPerson(team_id=team_id, person_id=people[1].id)
    drop = TeamPerson(team_id=team_id, person_id=people[0].id)
    with database.session() as s:
        store.insert(s, keep)
        store.insert(s, drop)

    with database.session() as s:
        assert store.delete(s, drop) is True
    with database.session() as s:
        assert store.delete(s, drop) is False
        assert store.find_by_team_id(s, team_id) == [keep]
