# db/stores/team.py
import logging
from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.orm import Session

from team_roster.db.mappers import team_from_row
from team_roster.db.models.team import Team as TeamModel
from team_roster.db.schemas.team import Team

logger = logging.getLogger(__name__)

_TEAM_COLUMNS = (TeamModel.team_id, TeamModel.name, TeamModel.poc_person_id)


class TeamStore:
    """
    Rows of the ``team`` table.

    Every method takes the active Session as its first argument and never
    commits: transaction boundaries belong to the caller. Members are not
    touched here; see TeamPersonStore.
    """

    def insert(self, s: Session, team: Team) -> int:
        """
        Insert a team row.

        The point-of-contact column is written from ``team.point_of_contact_id``
        and stays NULL when it is None.

        Args:
            s: Active session (transactional context).
            team: Team DTO; ``id`` and ``members`` are ignored.

        Returns:
            int: Generated team id.

        Raises:
            IntegrityError: On duplicate name, or when the point of contact
                does not reference an existing person.
        """
        stmt = (
            insert(TeamModel)
            .values(name=team.name, poc_person_id=team.point_of_contact_id)
            .returning(TeamModel.team_id)
        )
        team_id = int(s.execute(stmt).scalar_one())
        logger.debug("Inserted team %s (%r)", team_id, team.name)
        return team_id

    def update(self, s: Session, team: Team) -> None:
        """
        Update name and point of contact of ``team.id``.

        Notes:
            - Passing ``point_of_contact_id=None`` writes NULL.
            - A missing id is a silent no-op; callers check existence first.

        Raises:
            IntegrityError: On duplicate name or unknown point of contact.
        """
        stmt = (
            update(TeamModel)
            .where(TeamModel.team_id == team.id)
            .values(name=team.name, poc_person_id=team.point_of_contact_id)
            .execution_options(synchronize_session=False)
        )
        res = s.execute(stmt)
        logger.debug("Updated team %s, %s row(s) affected", team.id, res.rowcount)

    def get(self, s: Session, team_id: int) -> Optional[Team]:
        """
        Fetch a team row by id.

        Returns:
            Optional[Team]: DTO without members if found; otherwise None.
        """
        if team_id is None:
            return None

        row = s.execute(select(*_TEAM_COLUMNS).where(TeamModel.team_id == team_id)).first()
        return team_from_row(row) if row is not None else None

    def find_by_name(self, s: Session, pattern: str) -> List[Team]:
        """
        SQL LIKE lookup on name (``%`` and ``_`` are wildcards, case
        sensitivity follows the backend collation). Ordered by id.
        """
        stmt = (
            select(*_TEAM_COLUMNS)
            .where(TeamModel.name.like(pattern))
            .order_by(TeamModel.team_id.asc())
        )
        return [team_from_row(r) for r in s.execute(stmt)]

    def get_all(self, s: Session) -> List[Team]:
        stmt = select(*_TEAM_COLUMNS).order_by(TeamModel.team_id.asc())
        return [team_from_row(r) for r in s.execute(stmt)]

    def count(self, s: Session) -> int:
        return int(s.execute(select(func.count()).select_from(TeamModel)).scalar_one())

    def delete(self, s: Session, team_id: int) -> None:
        """
        Delete a team row. Membership rows must already be gone, otherwise the
        foreign key on team_person raises IntegrityError.
        """
        s.execute(
            delete(TeamModel)
            .where(TeamModel.team_id == team_id)
            .execution_options(synchronize_session=False)
        )
        logger.debug("Deleted team %s", team_id)
